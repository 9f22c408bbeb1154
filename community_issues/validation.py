"""
Field checks for issue creation.

A required field counts as missing when it is absent, null, an empty string,
or any other falsy JSON value. Present values are converted to text and
truncated; nothing is rejected for being too long.
"""

from collections.abc import Mapping
from typing import Any

from .constants import FIELD_MAX_LENGTHS, REQUIRED_FIELDS
from .errors import ValidationError
from .utils import truncate


def missing_required_fields(payload: Mapping[str, Any]) -> list[str]:
    """Return the names of required fields that are missing, in declaration order."""
    return [field for field in REQUIRED_FIELDS if not payload.get(field)]


def ensure_required_fields(payload: Mapping[str, Any]) -> None:
    """
    Raise ValidationError listing every missing required field.

    The message is "Missing fields: " followed by the names joined with commas.
    """
    missing = missing_required_fields(payload)
    if missing:
        raise ValidationError(f"Missing fields: {','.join(missing)}", fields=missing)


def normalize_issue_fields(payload: Mapping[str, Any]) -> dict[str, str | None]:
    """Truncate each text field to its limit; an empty contact becomes None."""
    fields: dict[str, str | None] = {
        field: truncate(payload[field], FIELD_MAX_LENGTHS[field]) for field in REQUIRED_FIELDS
    }
    contact = payload.get("contact")
    fields["contact"] = truncate(contact, FIELD_MAX_LENGTHS["contact"]) if contact else None
    return fields


__all__ = ["missing_required_fields", "ensure_required_fields", "normalize_issue_fields"]
