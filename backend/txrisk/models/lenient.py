"""Base model that degrades malformed fields to their defaults instead of failing."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

LOGGER = logging.getLogger(__name__)


class LenientModel(BaseModel):
    """Immutable input record where one bad field never rejects the whole record.

    Each field is validated normally; when validation fails the field falls back
    to its declared default. Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_error(cls, value: Any, handler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            LOGGER.debug("Coercing malformed %s.%s=%r to default", cls.__name__, info.field_name, value)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    @classmethod
    def coerce(cls, raw: Any):
        """Build an instance from a model, mapping or anything else (treated as empty)."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, BaseModel):
            raw = raw.model_dump(by_alias=True)
        if not isinstance(raw, Mapping):
            if raw is not None:
                LOGGER.debug("Treating non-mapping %s input %r as empty", cls.__name__, type(raw))
            return cls()
        return cls.model_validate(dict(raw))


__all__ = ["LenientModel"]
