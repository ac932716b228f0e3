"""Tests for the migration data models and their JSON form."""

import json

import pytest
from pydantic import ValidationError

from cms_migration.schemas.datamodel import (
    ExtractedItem,
    MigrationRecord,
    PageInfo,
    dump_migration_data,
    load_migration_data,
)


def _sample_data():
    return {
        1000: MigrationRecord(
            url='https://www.example.co.jp/terms/A02904.html',
            contents={
                1: ExtractedItem(component_name='h1-title', value='abc - 株価収益率'),
                2: ExtractedItem(component_name='text', value='P/E ratio'),
            },
        ),
        7: MigrationRecord(url='https://example.com/empty'),
    }


def test_page_info_is_immutable():
    page = PageInfo(page_id=1, url='https://example.com')

    with pytest.raises(ValidationError):
        page.url = 'https://example.org'


def test_extracted_item_rejects_empty_value():
    with pytest.raises(ValidationError):
        ExtractedItem(component_name='text', value='')


def test_json_is_pretty_and_unescaped():
    text = dump_migration_data(_sample_data())

    assert '\n    "1000": {' in text
    assert 'https://www.example.co.jp/terms/A02904.html' in text
    assert '株価収益率' in text
    assert 'P/E ratio' in text
    assert '"block_id": null' in text


def test_json_keeps_page_order():
    parsed = json.loads(dump_migration_data(_sample_data()))

    assert list(parsed) == ['1000', '7']
    assert list(parsed['1000']['contents']) == ['1', '2']


def test_round_trip(tmp_path):
    data = _sample_data()
    path = tmp_path / 'out.json'
    path.write_text(dump_migration_data(data), encoding='utf-8')

    assert load_migration_data(path) == data
