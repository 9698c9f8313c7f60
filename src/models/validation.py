"""Turn pydantic validation failures into per-field form messages."""
from pydantic import ValidationError


def field_errors(exc: ValidationError, messages: dict[str, str]) -> dict[str, str]:
    """Map a ValidationError to ``{field: message}`` (first error per field).

    Fields missing from *messages* fall back to pydantic's own text.
    """
    errors: dict[str, str] = {}
    for err in exc.errors():
        if not err.get("loc"):
            continue
        field = str(err["loc"][0])
        errors.setdefault(field, messages.get(field, err.get("msg", "Invalid value")))
    return errors
