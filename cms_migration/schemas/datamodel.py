from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional
from pathlib import Path
import json


class PageInfo(BaseModel):
    """A page to migrate"""
    model_config = ConfigDict(frozen=True)

    page_id: int
    url: str = Field(..., min_length=1)


class SelectorRule(BaseModel):
    """CSS selector and the component name its matches are labelled with"""
    model_config = ConfigDict(frozen=True)

    selector: str = Field(..., min_length=1)
    component_name: str = Field(..., min_length=1)


class ExtractedItem(BaseModel):
    """Single value extracted from a matched element"""
    # Filled in by the CMS import step, never here
    block_id: Optional[int] = None
    component_name: str
    value: str = Field(..., min_length=1)


class MigrationRecord(BaseModel):
    """Extracted contents of one page, keyed by sequence number"""
    url: str
    contents: Dict[int, ExtractedItem] = Field(default_factory=dict)


def dump_migration_data(data: Dict[int, MigrationRecord]) -> str:
    """Render migration data as pretty-printed JSON text"""
    plain = {str(page_id): record.model_dump(mode='json') for page_id, record in data.items()}
    return json.dumps(plain, ensure_ascii=False, indent=4)


def load_migration_data(path: Path) -> Dict[int, MigrationRecord]:
    """Load migration data back from a JSON file"""
    data = json.loads(path.read_text(encoding='utf-8'))
    return {int(page_id): MigrationRecord(**record) for page_id, record in data.items()}
