"""Closed registry of category icons.

Categories store an icon name chosen from the icon picker. Names outside the
registry fall back to the folder-tree icon.
"""

from enum import Enum
from typing import Dict, Optional


class CategoryIcon(str, Enum):
    FOLDER_TREE = "FolderTree"
    BOOK = "Book"
    BOOK_OPEN = "BookOpen"
    GRADUATION_CAP = "GraduationCap"
    CALCULATOR = "Calculator"
    FLASK = "FlaskConical"
    GLOBE = "Globe"
    LANGUAGES = "Languages"
    PALETTE = "Palette"
    MUSIC = "Music"
    NEWSPAPER = "Newspaper"
    FILE_TEXT = "FileText"
    CALENDAR = "Calendar"
    TROPHY = "Trophy"
    USERS = "Users"


ICON_GLYPHS: Dict[CategoryIcon, str] = {
    CategoryIcon.FOLDER_TREE: "🗂",
    CategoryIcon.BOOK: "📕",
    CategoryIcon.BOOK_OPEN: "📖",
    CategoryIcon.GRADUATION_CAP: "🎓",
    CategoryIcon.CALCULATOR: "🧮",
    CategoryIcon.FLASK: "🧪",
    CategoryIcon.GLOBE: "🌐",
    CategoryIcon.LANGUAGES: "🔤",
    CategoryIcon.PALETTE: "🎨",
    CategoryIcon.MUSIC: "🎵",
    CategoryIcon.NEWSPAPER: "📰",
    CategoryIcon.FILE_TEXT: "📄",
    CategoryIcon.CALENDAR: "📅",
    CategoryIcon.TROPHY: "🏆",
    CategoryIcon.USERS: "👥",
}

IMAGE_GLYPH = "🖼"


def resolve_icon(name: Optional[str]) -> CategoryIcon:
    """Map a stored icon name to a registered icon."""
    if not name:
        return CategoryIcon.FOLDER_TREE
    try:
        return CategoryIcon(name)
    except ValueError:
        return CategoryIcon.FOLDER_TREE


def icon_glyph(name: Optional[str], image_url: Optional[str] = None) -> str:
    """Glyph to show for a category; uploaded images take precedence."""
    if image_url:
        return IMAGE_GLYPH
    return ICON_GLYPHS[resolve_icon(name)]
