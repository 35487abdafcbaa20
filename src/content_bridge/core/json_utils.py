"""
Fast JSON Utilities
===================

Uses the fastest available JSON library:
1. orjson (Rust-based, fastest)
2. ujson (C-based, fast)
3. stdlib json (fallback)

Every backend produces the same compact text (``{"a":1,"b":"é"}``), so
stringified content is stable no matter which library is installed.
"""

import json as _stdlib_json
from typing import Any

_json_lib = "stdlib"

try:
    import orjson

    _json_lib = "orjson"
    _orjson_available = True
except ImportError:
    _orjson_available = False

try:
    import ujson  # type: ignore[import-untyped]

    _ujson_available = True
    if _json_lib == "stdlib":
        _json_lib = "ujson"
except ImportError:
    _ujson_available = False


def _default(obj: Any) -> Any:
    """Serialize pydantic models and other dumpable objects."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serialize object to compact JSON text using fastest available library.

    Args:
        obj: Object to serialize
        **kwargs: ``indent`` and ``sort_keys`` are honoured by every backend

    Returns:
        JSON string

    Raises:
        TypeError: If the object cannot be represented as JSON
    """
    indent = kwargs.get("indent")
    sort_keys = bool(kwargs.get("sort_keys"))

    if _orjson_available:
        option = orjson.OPT_NON_STR_KEYS
        if indent:
            option |= orjson.OPT_INDENT_2
        if sort_keys:
            option |= orjson.OPT_SORT_KEYS
        try:
            return orjson.dumps(obj, default=_default, option=option).decode("utf-8")
        except orjson.JSONEncodeError:
            # orjson stops at 64-bit integers; stdlib has no such limit
            pass

    elif _ujson_available:
        try:
            return ujson.dumps(
                obj,
                ensure_ascii=False,
                escape_forward_slashes=False,
                sort_keys=sort_keys,
                indent=indent or 0,
                default=_default,
            )
        except OverflowError:
            pass

    return _stdlib_dumps(obj, indent, sort_keys)


def _stdlib_dumps(obj: Any, indent: Any, sort_keys: bool) -> str:
    separators = None if indent else (",", ":")
    return _stdlib_json.dumps(
        obj,
        ensure_ascii=False,
        separators=separators,
        indent=indent,
        sort_keys=sort_keys,
        default=_default,
    )


def loads(s: str | bytes) -> Any:
    """
    Deserialize JSON string to Python object using fastest available library.

    Args:
        s: JSON string or bytes

    Returns:
        Deserialized Python object
    """
    if _orjson_available:
        if isinstance(s, str):
            s = s.encode("utf-8")
        return orjson.loads(s)

    elif _ujson_available:
        return ujson.loads(s)

    else:
        if isinstance(s, bytes):
            s = s.decode("utf-8")
        return _stdlib_json.loads(s)


def get_json_library() -> str:
    """
    Get the name of the JSON library being used.

    Returns:
        "orjson", "ujson", or "stdlib"
    """
    return _json_lib
