"""Parsing and validation of search criteria into query filters."""

from typing import Callable, Dict, Optional

from modules.gamestate.domain.errors import ValidationError
from modules.gamestate.domain.models import QueryFilter, SearchCriteria


def _field_key(name: str) -> str:
    return name.replace("_", "").lower()


def _parse_player_id(value) -> str:
    player_id = str(value).strip() if value is not None else ""
    if not player_id:
        raise ValidationError("PlayerId search value must not be empty")
    return player_id


def _parse_level(value) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"CurrentLevel must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"CurrentLevel must be an integer, got {value!r}"
        ) from e


_FIELD_PARSERS: Dict[str, Callable] = {
    "playerid": _parse_player_id,
    "currentlevel": _parse_level,
}

_FILTER_ATTRIBUTES = {
    "playerid": "player_id",
    "currentlevel": "min_level",
}


def validate_page_size(page_size) -> int:
    """Return ``page_size`` if it is a positive integer.

    Raises:
        ValidationError: For anything else.
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValidationError(f"page_size must be an integer, got {page_size!r}")
    if page_size <= 0:
        raise ValidationError(f"page_size must be positive, got {page_size}")
    return page_size


def build_query_filter(criteria: SearchCriteria) -> QueryFilter:
    """Validate ``criteria`` and return its predicates as a QueryFilter.

    Args:
        criteria: Caller supplied search criteria.

    Returns:
        QueryFilter with the recognized predicates set.

    Raises:
        ValidationError: On unknown field names, duplicate fields, a
            non-integer level, a non-positive page size or a non-string
            page token.
    """
    validate_page_size(criteria.page_size)
    if not isinstance(criteria.next_page_state, str):
        raise ValidationError("next_page_state must be a string")

    values: Dict[str, Optional[object]] = {}
    for name, raw_value in (criteria.search_fields or {}).items():
        key = _field_key(str(name))
        parser = _FIELD_PARSERS.get(key)
        if parser is None:
            raise ValidationError(f"Unknown search field: {name}")
        attribute = _FILTER_ATTRIBUTES[key]
        if attribute in values:
            raise ValidationError(f"Search field given more than once: {name}")
        values[attribute] = parser(raw_value)

    return QueryFilter(**values)
