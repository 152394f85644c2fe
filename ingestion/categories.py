import json
import logging
from typing import List, Optional, TextIO, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ingestion.listing import unwrap_list
from models.category import Category
from models.pagination import Pagination

logger = logging.getLogger(__name__)


class CategoryPayload(BaseModel):
    """Category record as serialized by the categories endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    slug: Optional[str] = None
    parent_id: Optional[int] = None
    is_active: bool = True
    icon: Optional[str] = None
    icon_image_url: Optional[str] = None
    news_count: Optional[int] = None
    country: Optional[str] = None
    depth: Optional[int] = None

    def to_category(self) -> Category:
        return Category(
            id=self.id,
            name=self.name,
            slug=self.slug or "",
            parent_id=self.parent_id,
            is_active=self.is_active,
            icon=self.icon,
            icon_image_url=self.icon_image_url,
            news_count=self.news_count or 0,
            country=self.country,
            depth=self.depth,
        )


class PaginationMeta(BaseModel):
    """Pagination block of a list response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    current_page: int = 1
    last_page: int = 1
    per_page: int = 24
    total: int = 0
    from_item: Optional[int] = Field(default=None, alias="from")
    to_item: Optional[int] = Field(default=None, alias="to")

    def to_pagination(self) -> Pagination:
        return Pagination(**self.model_dump())


def parse_records(records: list) -> List[Category]:
    """Validate raw records, skipping the ones that don't parse."""
    categories = []
    for index, record in enumerate(records):
        try:
            categories.append(CategoryPayload.model_validate(record).to_category())
        except ValidationError as e:
            logger.warning(f"Skipping malformed category at index {index}: {e}")
    return categories


def ingest(source: TextIO) -> Tuple[List[Category], Optional[Pagination]]:
    """
    Ingest a categories list response.

    Expected format: the JSON body of GET /categories, either a bare array or
    a ``data`` envelope with an optional ``pagination`` block.

    Raises:
        ValueError: If the source is not valid JSON.
    """
    try:
        payload = json.load(source)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in categories response: {e}") from e

    records, meta = unwrap_list(payload)
    categories = parse_records(records)
    logger.info(f"Parsed {len(categories)} of {len(records)} category records")

    pagination = None
    if meta is not None:
        try:
            pagination = PaginationMeta.model_validate(meta).to_pagination()
        except ValidationError as e:
            logger.warning(f"Ignoring malformed pagination block: {e}")

    return categories, pagination
