"""JSON codec for request inputs and typed responses."""

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from aiproxy.utils.exceptions import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


@lru_cache(maxsize=128)
def _adapter_for(output_type: Any) -> TypeAdapter:
    return TypeAdapter(output_type)


def serialize(value: Any) -> bytes:
    """Serialize a request input to JSON bytes.

    Pydantic models drop unset optional fields (None) so the provider applies
    its own defaults. Anything else (dicts, dataclasses, lists) goes through a
    TypeAdapter as-is.
    """
    if isinstance(value, BaseModel):
        return value.model_dump_json(exclude_none=True).encode("utf-8")
    return _adapter_for(type(value)).dump_json(value)


def deserialize(data: bytes, output_type: type[T]) -> T:
    """Decode JSON bytes into ``output_type``.

    Raises:
        DecodeError: If the body is not valid JSON or does not match the type
    """
    try:
        return _adapter_for(output_type).validate_json(data)
    except ValidationError as e:
        logger.error(f"Failed to decode response as {getattr(output_type, '__name__', output_type)}: {e}")
        raise DecodeError(str(e)) from e
