"""
Shared schema base classes and field helpers.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Optional


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire (either accepted on input)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


def blank_to_none(value: Any) -> Optional[Any]:
    """Forms send "" for an untouched optional field; store it as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def reject_null(value: Any, field: str) -> Any:
    """Required columns may be omitted from an update but never set to null."""
    if value is None:
        raise ValueError(f"{field} cannot be null")
    return value
