"""Shared decoding plumbing: wire validation and list decoding over Result."""

from collections.abc import Callable
from typing import TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from explorer.services.errors import DecodeError
from explorer.services.result import Err, Ok, Result

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)
D = TypeVar("D")


def parse_remote(model: type[M], raw: object) -> M:
    """Validate one wire record, re-raising pydantic failures as DecodeError."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        field: str = ".".join(str(p) for p in first["loc"]) or model.__name__
        raise DecodeError(field, first.get("input"), first["msg"].lower() + ":") from e


def decode_one(remote: Result[object], decode: Callable[[object], D]) -> Result[D]:
    """Decode a single-record payload; a DecodeError becomes an Err."""

    def _decode(raw: object) -> Result[D]:
        try:
            return Ok(decode(raw))
        except DecodeError as e:
            logger.warning("decode_failed", field=e.field, error=str(e))
            return Err(f"Malformed node response: {e}")

    return remote.and_then(_decode)


def decode_list(remote: Result[object], decode: Callable[[object], D]) -> Result[list[D]]:
    """Apply ``decode`` to every row; one bad row fails the whole list."""

    def _decode_all(rows: object) -> Result[list[D]]:
        if not isinstance(rows, list):
            return Err(f"Malformed node response: expected a list, got {type(rows).__name__}")
        try:
            return Ok([decode(row) for row in rows])
        except DecodeError as e:
            logger.warning("decode_failed", field=e.field, error=str(e))
            return Err(f"Malformed node response: {e}")

    return remote.and_then(_decode_all)
