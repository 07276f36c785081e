"""src/divan/utils/proplist.py

Helpers for proplists: lists of ``(key, value)`` pairs used as lightweight
mappings for view options, query parameters and credentials.
"""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from divan.utils.coercion import Symbol, to_text

__all__ = ["get_value", "parse_options", "merge", "merge1"]

logger = logging.getLogger(__name__)

Pair = Tuple[Any, Any]
Proplist = List[Pair]
PairSource = Union[Mapping[Any, Any], Iterable[Pair]]


def _pairs(source: PairSource) -> Iterable[Pair]:
    if isinstance(source, Mapping):
        return source.items()
    return source


def get_value(key: Any, proplist: PairSource, default: Any = None) -> Any:
    """
    Look up a key in a proplist.

    Args:
        key: Key to look for.
        proplist: Proplist or mapping.
        default: Returned when the key is absent.

    Returns:
        Value of the first pair whose key equals ``key``.
    """
    for k, v in _pairs(proplist):
        if k == key:
            return v
    return default


def parse_options(
    options: Iterable[Any], acc: Optional[Proplist] = None
) -> Optional[List[Tuple[str, Any]]]:
    """
    Normalize view options into a proplist with text keys.

    A bare ``Symbol`` flag ``F`` becomes ``("F", True)``; a ``(key, value)``
    pair keeps its value and gets its key converted to text. Each parsed
    option is pushed onto the front of ``acc``, so the result lists options
    in reverse input order, followed by ``acc``.

    Args:
        options: Flags and pairs.
        acc: Already parsed options to prepend onto.

    Returns:
        The normalized proplist, or None when any item has another shape.
    """
    parsed: List[Tuple[str, Any]] = list(acc) if acc else []
    for item in options:
        if isinstance(item, Symbol):
            parsed.insert(0, (to_text(item), True))
        elif (
            isinstance(item, tuple)
            and len(item) == 2
            and isinstance(item[0], (str, bytes))
        ):
            parsed.insert(0, (to_text(item[0]), item[1]))
        else:
            logger.debug("Unrecognized option %r", item)
            return None
    return parsed


def merge(
    resolver: Callable[[Any, Any, Any], Any], a: PairSource, b: PairSource
) -> Proplist:
    """
    Merge two proplists.

    Every key of ``a`` and ``b`` is present in the result. When a key occurs
    in both, ``resolver(key, value_a, value_b)`` gives its value. Within
    each proplist the last pair of a repeated key wins.
    """
    merged = dict(_pairs(a))
    for key, value in dict(_pairs(b)).items():
        if key in merged:
            merged[key] = resolver(key, merged[key], value)
        else:
            merged[key] = value
    return list(merged.items())


def merge1(a: PairSource, b: PairSource) -> Proplist:
    """Merge two proplists, keeping the value from ``a`` on conflict."""
    return merge(lambda _key, value_a, _value_b: value_a, a, b)
