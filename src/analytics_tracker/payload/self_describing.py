"""Self-describing JSON documents.

A self-describing document pairs a schema URI with the data it
describes.  Custom contexts and self-describing event bodies are both
carried this way; nesting is allowed (the contexts envelope wraps a list
of documents, the unstruct envelope wraps one).
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator


class SelfDescribingJson(BaseModel):
    """Schema URI plus data."""

    schema_uri: str = Field(alias="schema")
    data: Union[dict[str, Any], list[Any], SelfDescribingJson] = Field(
        default_factory=dict,
    )

    model_config = {"populate_by_name": True}

    @field_validator("schema_uri")
    @classmethod
    def _schema_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("schema cannot be empty")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Render as ``{"schema": ..., "data": ...}``, nesting recursively."""
        return {"schema": self.schema_uri, "data": _render(self.data)}


def _render(value: Any) -> Any:
    if isinstance(value, SelfDescribingJson):
        return value.to_dict()
    if isinstance(value, list):
        return [_render(item) for item in value]
    if isinstance(value, dict):
        return {key: _render(item) for key, item in value.items()}
    return value
