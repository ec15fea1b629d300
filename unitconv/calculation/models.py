# -*- coding: utf-8 -*-
"""
Conversion request and result models.

Pydantic v2 models for the values passed across the engine boundary. Both
are transient: built per call and discarded when the call returns. Field
names match the JSON framing used by HTTP callers ("from"/"to" aliases).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from unitconv.data.units import Category
from unitconv.exceptions import ValidationError

REQUEST_FIELDS = ("value", "from", "to")


class ConversionRequest(BaseModel):
    """Raw conversion input.

    Values are kept as supplied; the category validators, not pydantic,
    decide whether they are acceptable, so every rejection surfaces as a
    typed engine error.

    Attributes:
        category: Category member or name.
        value: Number or numeric string.
        from_unit: Source unit symbol.
        to_unit: Target unit symbol.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    category: Union[Category, str]
    value: Any = None
    from_unit: Any = Field(default=None, alias="from")
    to_unit: Any = Field(default=None, alias="to")

    @classmethod
    def from_payload(
        cls,
        category: Union[Category, str],
        payload: Mapping[str, Any],
    ) -> "ConversionRequest":
        """Build a request from a JSON body ``{"value", "from", "to"}``.

        Raises:
            ValidationError: If the body is not an object or a key is missing.
        """
        if not isinstance(payload, Mapping):
            raise ValidationError(
                "Request body must be a JSON object",
                context={"type": type(payload).__name__},
            )

        missing = [key for key in REQUEST_FIELDS if key not in payload]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                context={"missing_fields": missing},
            )

        return cls(
            category=category,
            value=payload["value"],
            from_unit=payload["from"],
            to_unit=payload["to"],
        )


class ConversionInput(BaseModel):
    """The normalized input echoed back with a result."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    value: float
    from_unit: str = Field(alias="from")
    to_unit: str = Field(alias="to")


class ConversionResult(BaseModel):
    """Successful conversion outcome."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    result: float = Field(..., description="Converted value in the target unit")
    input: ConversionInput = Field(..., description="Validated request input")
    category: Category

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to ``{"result": r, "input": {"value", "from", "to"}}``."""
        return self.model_dump(mode="json", by_alias=True, exclude={"category"})
