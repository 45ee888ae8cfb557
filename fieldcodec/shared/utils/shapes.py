"""Shape predicates shared by every converter.

A field value is classified as a scalar, an array (list) or a map before a
converter picks its branch.
"""

from collections.abc import Mapping
from typing import Any

from fieldcodec.core.constants import TYPE_KEY
from fieldcodec.shared.telemetry import get_logger

logger = get_logger(__name__)


def is_dynamic_map(value: Any) -> bool:
    """Return True if value is a plain key-value map (not None, not a list)."""
    return isinstance(value, Mapping)


def is_tagged(value: Any) -> bool:
    """Return True if value is a wire shape (a map carrying '@type')."""
    return is_dynamic_map(value) and TYPE_KEY in value


def type_of(value: Any) -> str:
    """Return the '@type' of a wire shape or shadow entry, '' when absent."""
    if not is_dynamic_map(value):
        return ""
    tag = value.get(TYPE_KEY)
    return tag if isinstance(tag, str) else ""


def field_or_default(value: Any, name: str, expected: type | tuple[type, ...], default: Any) -> Any:
    """Return value[name] when it has the expected type, else default.

    Missing or malformed metadata never raises; it is logged at DEBUG.
    Booleans are not accepted where a number is expected.
    """
    if not is_dynamic_map(value) or name not in value:
        return default
    found = value[name]
    types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(found, types) and (bool in types or not isinstance(found, bool)):
        return found
    logger.debug("Ignoring malformed %s: %r", name, found)
    return default

