"""src/divan/utils/serialization.py

JSON serialization for Divan.

JSON objects are represented by ``JsonObject`` so that an object, even an
empty one, is never confused with an array.
"""

import json
import logging
from typing import Any, Iterable, Iterator, List, Mapping, Tuple, Union

from divan.exceptions import InvalidJSONError, JSONEncodeError
from divan.utils.coercion import to_text

__all__ = ["JsonObject", "json_encode", "json_decode"]

logger = logging.getLogger(__name__)


class JsonObject:
    """Ordered ``(key, value)`` pairs of a JSON object."""

    __slots__ = ("pairs",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self, pairs: Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]] = ()
    ):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        self.pairs: List[Tuple[Any, Any]] = list(pairs)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self.pairs == other.pairs

    def __repr__(self) -> str:
        return f"JsonObject({self.pairs!r})"

    def get(self, key: Any, default: Any = None) -> Any:
        """Value of the first pair with this key, or default."""
        for k, v in self.pairs:
            if k == key:
                return v
        return default

    def to_dict(self) -> dict:
        """Shallow dict of the pairs; the last duplicate key wins."""
        return dict(self.pairs)


def _encode(value: Any) -> str:
    if isinstance(value, Mapping):
        value = JsonObject(value)
    if isinstance(value, JsonObject):
        members = (f"{_encode(to_text(k))}:{_encode(v)}" for k, v in value.pairs)
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode(v) for v in value) + "]"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8")
    if value is None or isinstance(value, (str, int, float)):
        return json.dumps(value, allow_nan=False)
    raise JSONEncodeError(value)


def json_encode(value: Any) -> str:
    """
    Serializes a value to a compact JSON string.

    Object members are written in order, repeated keys included.

    Raises:
        JSONEncodeError: If the value, or anything inside it, has no JSON form.
    """
    try:
        return _encode(value)
    except ValueError as exc:
        raise JSONEncodeError(value) from exc


def json_decode(payload: Union[str, bytes]) -> Any:
    """
    Parses a JSON document, decoding objects as ``JsonObject``.

    Raises:
        InvalidJSONError: If the payload is not valid JSON.
    """
    try:
        return json.loads(payload, object_pairs_hook=JsonObject)
    except (TypeError, ValueError) as exc:
        logger.debug("Invalid JSON payload: %s", exc)
        raise InvalidJSONError(payload) from exc
