from dataclasses import dataclass
from typing import Any, Mapping, Optional

from django.conf import settings


def _parse_non_negative(raw: Any, default: int) -> int:
    try:
        value = int(raw)
    except (ValueError, TypeError):
        return default
    return value if value >= 0 else default


@dataclass
class ProductFilterCommand:
    """Normalized catalog filter: sentinel categories and blank search become None."""

    category: Optional[str] = None
    search: Optional[str] = None
    offset: int = 0
    limit: int = 6

    @staticmethod
    def normalize_category(raw: Any) -> Optional[str]:
        if raw is None:
            return None
        value = str(raw)
        if value in settings.CATALOG_ALL_CATEGORY_TOKENS:
            return None
        return value

    @staticmethod
    def normalize_search(raw: Any) -> Optional[str]:
        if raw is None:
            return None
        value = str(raw)
        return value if value else None

    @staticmethod
    def from_raw(params: Optional[Mapping[str, Any]]):
        data = params or {}
        limit = _parse_non_negative(data.get("limit"), settings.CATALOG_PAGE_SIZE)
        if limit == 0:
            limit = settings.CATALOG_PAGE_SIZE
        return ProductFilterCommand(
            category=ProductFilterCommand.normalize_category(data.get("category")),
            search=ProductFilterCommand.normalize_search(data.get("search")),
            offset=_parse_non_negative(data.get("offset"), 0),
            limit=min(limit, settings.CATALOG_MAX_PAGE_SIZE),
        )
