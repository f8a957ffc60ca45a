"""Result shape contracts.

The Pianoteq server is inconsistent about how it wraps results: most state
queries return a one-element list, catalogues return real lists, and the
current audio device comes back as a bare object. Each client operation
declares which of these it expects instead of guessing from the payload.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from pianoteq.errors import ProtocolError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResultShape(Enum):
    """How a method's ``result`` payload is laid out on the wire."""

    NONE = "none"
    """Command methods; the result is discarded."""

    RAW = "raw"
    """Returned as decoded JSON, no model applied."""

    OBJECT = "object"
    """A bare JSON object."""

    SINGLE = "single"
    """One object wrapped in a list; an empty list yields a default instance."""

    LIST = "list"
    """A true list, order preserved."""


def decode_result(
    shape: ResultShape,
    model: type[BaseModel] | None,
    raw: Any,
    *,
    body: str = "",
) -> Any:
    """Decode *raw* according to *shape*.

    Raises :class:`ProtocolError` when the payload does not have the
    declared shape or does not validate against *model*. *body* is the raw
    response text, used for the error excerpt.
    """
    if shape is ResultShape.NONE:
        return None
    if shape is ResultShape.RAW:
        return raw
    if model is None:
        msg = f"{shape.name} results require a model"
        raise ValueError(msg)

    excerpt_source = body or _dump(raw)
    try:
        if shape is ResultShape.OBJECT:
            if not isinstance(raw, dict):
                msg = f"Expected an object result, got {_kind(raw)}"
                raise ProtocolError(msg, excerpt_source)
            return model.model_validate(raw)

        if not isinstance(raw, list):
            msg = f"Expected a list result, got {_kind(raw)}"
            raise ProtocolError(msg, excerpt_source)

        if shape is ResultShape.LIST:
            return [model.model_validate(item) for item in raw]

        if not raw:
            logger.warning("Empty %s list in result, using defaults", model.__name__)
            return model()
        return model.model_validate(raw[0])
    except ValidationError as exc:
        msg = f"Result does not match {model.__name__}: {exc.error_count()} validation error(s)"
        raise ProtocolError(msg, excerpt_source) from exc


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "list"
    return type(value).__name__


def _dump(value: Any) -> str:
    return json.dumps(value, default=str)
