"""Category model for the categories admin screen."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Represents a content category as returned by the categories API.

    Attributes:
        id: Unique identifier.
        name: Display name.
        slug: URL slug.
        parent_id: Optional parent category ID for hierarchical categories.
        is_active: Whether the category is published.
        icon: Optional icon name (see models.icons).
        icon_image_url: Optional uploaded icon image, shown instead of the icon.
        news_count: Number of articles filed under the category.
        country: Country id the category belongs to.
        depth: Tree depth, filled in when the tree is flattened.
    """

    id: int
    name: str
    slug: str = ""
    parent_id: Optional[int] = None
    is_active: bool = True
    icon: Optional[str] = None
    icon_image_url: Optional[str] = None
    news_count: int = 0
    country: Optional[str] = None
    depth: Optional[int] = None
