"""Tests for console output and the JSON output file."""

import json

import pytest

from cms_migration.reporter import MigrationReporter
from cms_migration.schemas.datamodel import ExtractedItem, MigrationRecord


@pytest.fixture
def migration_data():
    return {
        1000: MigrationRecord(
            url='https://example.com/terms/A02904.html',
            contents={1: ExtractedItem(component_name='h1-title', value='abc - 用語')},
        ),
    }


def test_writes_identical_json_to_file(output_file, console, migration_data):
    json_text = MigrationReporter(output_file, console=console).report(migration_data)

    assert output_file.read_text(encoding='utf-8') == json_text
    assert json.loads(json_text)['1000']['contents']['1']['value'] == 'abc - 用語'


def test_console_shows_dump_json_and_path(output_file, console, migration_data):
    json_text = MigrationReporter(output_file, console=console).report(migration_data)
    printed = console.file.getvalue()

    assert '=== Migration Results ===' in printed
    assert 'Array Structure:' in printed
    assert '=== JSON Output ===' in printed
    assert json_text in printed
    assert printed.rstrip().endswith(f'Results saved to: {output_file}')


def test_overwrites_previous_output(output_file, console, migration_data):
    output_file.write_text('stale content that is longer than nothing', encoding='utf-8')

    MigrationReporter(output_file, console=console).report({})

    assert output_file.read_text(encoding='utf-8') == '{}'


def test_write_failure_propagates(tmp_path, console, migration_data):
    reporter = MigrationReporter(tmp_path / 'missing' / 'out.json', console=console)

    with pytest.raises(OSError):
        reporter.report(migration_data)
