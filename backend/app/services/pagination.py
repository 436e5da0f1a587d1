"""Offset pagination arithmetic shared by the list and search endpoints."""
import math
from dataclasses import dataclass


# Keeps (page - 1) * page_size inside a signed 64-bit OFFSET.
MAX_QUERY_INT = 2**31 - 1


def parse_positive_int(raw: str | None, default: int, maximum: int = MAX_QUERY_INT) -> int:
    """Parse a query value, falling back to default when missing, not positive or above maximum."""
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if 0 < value <= maximum else default


@dataclass(frozen=True)
class PageInfo:
    """Page navigation numbers for a result set of known size."""

    current_page: int
    previous_page: int
    next_page: int
    first_page: int
    last_page: int
    total: int

    @classmethod
    def build(cls, page: int, page_size: int, total: int) -> "PageInfo":
        last_page = max(1, math.ceil(total / page_size))
        return cls(
            current_page=page,
            previous_page=max(1, page - 1),
            next_page=min(page + 1, last_page),
            first_page=1,
            last_page=last_page,
            total=total,
        )
