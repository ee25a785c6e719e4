"""Pydantic models for incoming date statements.

A statement is the attribute map a metadata record carries for one date:

    {"value": "1920", "encoding": {"code": "w3cdtf"}, "qualifier": "approximate",
     "status": "primary", "type": "publication"}

Ranges carry their endpoints in ``structuredValue``, each tagged with
``"type": "start"`` or ``"type": "end"``.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

ROLE_TYPES = ("start", "end")


class DateEncoding(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    code: Optional[str] = None


class DateStatement(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    value: Optional[str] = None
    encoding: Optional[DateEncoding] = None
    qualifier: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    structured_value: Tuple[DateStatement, ...] = Field(default=(), alias="structuredValue")

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> Any:
        # Catalog exports sometimes carry bare years as numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("structured_value", mode="before")
    @classmethod
    def _coerce_structured_value(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def encoding_code(self) -> str | None:
        return self.encoding.code if self.encoding else None

    @property
    def role(self) -> str | None:
        """'start' or 'end' when this statement is a range endpoint."""
        return self.type if self.type in ROLE_TYPES else None

    @property
    def event_type(self) -> str | None:
        """Semantic type such as 'publication'; None for range endpoints."""
        return None if self.type in ROLE_TYPES else self.type

    @classmethod
    def from_attributes(cls, attributes: dict) -> DateStatement:
        """Validate a raw attribute map; raises pydantic.ValidationError."""
        return cls.model_validate(attributes)


DateStatement.model_rebuild()
