"""
Query-string parsing for the listing endpoints.

Rules:
- page:   integer >= 1, default 1 (missing / non-numeric -> default), capped so
          the offset fits a 64-bit integer
- limit:  integer clamped to [1, MAX_PAGE_SIZE], default DEFAULT_PAGE_SIZE
- sort field / direction: unknown values silently fall back to the default
- enum filters (department type): unknown values are rejected with the allowed set
- comma lists: split on ",", blanks dropped; numeric lists drop non-numeric tokens
- free text: trimmed, lower-cased, empty -> no filter
"""

from enum import Enum
from typing import Optional, TypeVar

from org_api.config.settings import Config
from org_api.domain.exceptions import InvalidParameterError
from org_api.domain.value_objects import (
    DepartmentFilters,
    DepartmentType,
    NewsFilters,
    Pagination,
    SortOrder,
    UserFilters,
    UserOrderField,
)

E = TypeVar("E", bound=Enum)


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Plain ASCII decimal with an optional leading minus; anything else is None."""
    if raw is None:
        return None
    text = raw.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter's int conversion limit
        return None


def parse_page(raw: Optional[str]) -> int:
    value = parse_int(raw)
    if value is None:
        return 1
    return max(1, value)


def parse_limit(raw: Optional[str]) -> int:
    value = parse_int(raw)
    if value is None:
        value = Config.DEFAULT_PAGE_SIZE
    return min(Config.MAX_PAGE_SIZE, max(1, value))


def parse_pagination(page: Optional[str], limit: Optional[str]) -> Pagination:
    size = parse_limit(limit)
    # keeps the offset bindable; any page that far out is empty anyway
    return Pagination(page=min(parse_page(page), Pagination.last_page(size)), limit=size)


def parse_choice(raw: Optional[str], enum_cls: type[E], default: E) -> E:
    """Lenient enum parse: anything outside the allow-list yields the default."""
    if raw is None:
        return default
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        return default


def parse_department_type(raw: Optional[str]) -> Optional[DepartmentType]:
    """Strict enum parse: an unknown type is a client error."""
    if raw is None or not raw.strip():
        return None
    try:
        return DepartmentType(raw.strip().lower())
    except ValueError:
        raise InvalidParameterError(
            "Invalid type value",
            metadata_key="allowedTypes",
            allowed=DepartmentType.allowed(),
        )


def split_csv(raw: Optional[str]) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(token.strip() for token in raw.split(",") if token.strip())


def split_int_csv(raw: Optional[str]) -> tuple[int, ...]:
    values = (parse_int(token) for token in split_csv(raw))
    return tuple(value for value in values if value is not None)


def normalize_text(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    return raw.strip().lower() or None


# ==================== PER-ENDPOINT FILTERS ====================


def parse_department_filters(
    type_: Optional[str], year: Optional[str], acronym: Optional[str]
) -> DepartmentFilters:
    return DepartmentFilters(
        type=parse_department_type(type_),
        year=parse_int(year),
        acronym=normalize_text(acronym),
    )


def parse_news_filters(order: Optional[str], search: Optional[str]) -> NewsFilters:
    return NewsFilters(
        tag_title=Config.NEWS_TAG_TITLE,
        search=normalize_text(search),
        order=parse_choice(order, SortOrder, SortOrder.DESC),
    )


def parse_user_filters(
    order_by: Optional[str],
    order: Optional[str],
    period_years: Optional[str],
    department_ids: Optional[str],
    position_names: Optional[str],
) -> UserFilters:
    return UserFilters(
        period_years=split_int_csv(period_years),
        department_ids=split_csv(department_ids),
        position_names=split_csv(position_names),
        order_by=parse_choice(order_by, UserOrderField, UserOrderField.NAME),
        order=parse_choice(order, SortOrder, SortOrder.ASC),
    )
