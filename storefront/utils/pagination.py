"""Pagination helpers shared by list endpoints."""
import math
from typing import Any, Dict, Sequence

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def to_paginated(items: Sequence[Any], total: int, page: int, limit: int) -> Dict[str, Any]:
    """Wrap a page of items with its metadata block."""
    return {
        "data": list(items),
        "meta": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": math.ceil(total / limit) if limit else 0,
        },
    }
