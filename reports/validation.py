"""
Identifier checks shared by the report operations.
"""
import re
from typing import Optional

from .exceptions import InvalidArgument

ID_PATTERN = re.compile(r"[0-9a-f]{24}")


def is_valid_id(value: str) -> bool:
    """Check that value looks like a storage identifier (24 lowercase hex chars)."""
    return isinstance(value, str) and ID_PATTERN.fullmatch(value) is not None


def validate_id(value: str, field: str) -> str:
    """
    Validate a required identifier.

    Raises:
        InvalidArgument: If the identifier is malformed
    """
    if not is_valid_id(value):
        raise InvalidArgument(f"Invalid {field.replace('_', ' ')}: {value!r}", field)
    return value


def validate_optional_id(value: Optional[str], field: str) -> Optional[str]:
    """Validate an identifier filter; None means no restriction."""
    if value is None:
        return None
    return validate_id(value, field)
