"""
Common response models and utilities.

Shared pydantic configuration for the camelCase JSON wire format.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys and buildable from ORM rows."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

