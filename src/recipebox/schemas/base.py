"""Shared Pydantic bases.

Every payload crossing the HTTP boundary, and every stored recipe document,
is serialized with camelCase keys. Python code uses the snake_case names.

- APIRequest: request bodies, query models and stored documents
- APIResponse: response bodies
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """camelCase aliases, validated defaults and assignments."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Inbound shape. Unknown keys are dropped rather than rejected."""

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Outbound shape. Undeclared fields are an error."""

    model_config = ConfigDict(extra="forbid")
