"""Product filter state: field catalogue, query string and persistence codec.

A filter state is a plain ``dict[str, str]``. Missing keys and empty values
mean "no constraint". Range columns are split into two independent keys
(``minPrice`` / ``maxPrice``) so either bound can be edited on its own.
"""
import json
import logging
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

# Substring / exact text filters, in table column order
TEXT_FILTER_FIELDS = ("productId", "name", "description", "category")

# Columns filtered by a min/max pair
RANGE_FILTER_FIELDS = ("price", "quantity")

STATUS_FILTER_FIELD = "status"


def range_keys(field: str) -> tuple[str, str]:
    """Return the ``(min<Field>, max<Field>)`` keys for a range column."""
    suffix = field[:1].upper() + field[1:]
    return f"min{suffix}", f"max{suffix}"


FILTER_KEYS = (
    TEXT_FILTER_FIELDS
    + tuple(key for field in RANGE_FILTER_FIELDS for key in range_keys(field))
    + (STATUS_FILTER_FIELD,)
)


def clean_filters(filters: dict | None) -> dict[str, str]:
    """Drop keys whose value is None or an empty string; stringify the rest."""
    if not filters:
        return {}
    return {
        key: str(value)
        for key, value in filters.items()
        if value is not None and value != ""
    }


def has_constraints(filters: dict | None) -> bool:
    return bool(clean_filters(filters))


def build_query(filters: dict | None) -> str:
    """URL-encode the non-empty filters, preserving insertion order."""
    return urlencode(clean_filters(filters))


def dump_filters(filters: dict) -> str:
    """Serialize for localStorage (compact, same shape JSON.stringify writes)."""
    return json.dumps(filters, separators=(",", ":"), ensure_ascii=False)


def load_filters(raw: str | None) -> dict[str, str]:
    """Parse a persisted filter mapping; anything malformed yields ``{}``."""
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Ignoring malformed persisted filters")
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring persisted filters of type %s", type(data).__name__)
        return {}
    return {str(key): "" if value is None else str(value) for key, value in data.items()}
