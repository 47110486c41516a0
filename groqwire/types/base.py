"""Base classes for request and response payloads.

RequestModel
    Pydantic model whose wire form omits unset fields: ``Opt.absent()`` and
    plain ``None`` values are dropped, ``Opt.null()`` is sent as ``null``.
    ``to_wire()`` returns the JSON-ready dict (aliases applied) used as the
    request body.

ResponseModel
    Lenient response schema: unknown keys are kept (``extra="allow"``) so new
    server fields never break decoding.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer

from ..base.options.optional import Opt


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @classmethod
    def _wire_names(cls) -> Dict[str, str]:
        names: Dict[str, str] = {}
        for name, info in cls.model_fields.items():
            names[name] = name
            if info.alias:
                names[info.alias] = name
            if info.serialization_alias:
                names[info.serialization_alias] = name
        return names

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        names = self._wire_names()
        out: Dict[str, Any] = {}
        for key, value in data.items():
            raw = getattr(self, names[key]) if key in names else value
            if isinstance(raw, Opt):
                if raw.is_absent:
                    continue
            elif raw is None:
                continue
            out[key] = value
        return out

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON body for this request."""
        return self.model_dump(mode="json", by_alias=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")


__all__ = ["RequestModel", "ResponseModel"]
