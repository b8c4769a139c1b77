"""
Message serializer - turns arbitrary values into readable log text.

Every argument passed to a logger method goes through serialize() at top
level. Containers are walked recursively; nested values stay structured
(lists / dicts) and only the outermost call encodes them to text.

Rendering rules by kind:
    string, number  -> as-is, no escaping
    boolean         -> "(Boolean)true" at top level, raw boolean when nested
    None            -> "[object Null]"
    UNDEFINED       -> "[object Undefined]"
    callable        -> signature line, body replaced by "{ [awesome code] }"
    sequence, set   -> top level: compact JSON items without brackets (1,"x",true)
    mapping/object  -> top level: compact JSON ({"a":1,"b":[true]})
    opaque          -> str(value) (repr for exceptions), bytes included

A container that is already being serialized higher up the same branch
renders as "[Circular]". Shared but acyclic references render in full.
"""

import inspect
import json
import os
import re
from collections import deque
from collections.abc import Iterable, Mapping, Sequence, Set
from enum import Enum
from numbers import Real
from typing import Any

NULL_TAG = "[object Null]"
UNDEFINED_TAG = "[object Undefined]"
CIRCULAR_TAG = "[Circular]"
BOOLEAN_PREFIX = "(Boolean)"

CODE_PLACEHOLDER = ") { [awesome code] }"
NATIVE_MARKER = "built-in"
_PARAMS_END = re.compile(r"\).*")
_DEFINITION = re.compile(r"(?:async\s+def|def|class)\b")


class SerializeContext(Enum):
    """Where a value sits: top level, inside a mapping, or inside a sequence."""

    NONE = "none"
    OBJECT = "object"
    ARRAY = "array"


class ValueKind(Enum):
    """Closed set of value categories the serializer knows how to render."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    CALLABLE = "callable"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OPAQUE = "opaque"


class _Undefined:
    """Marker for "no value", distinct from None."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def classify(value: Any) -> ValueKind:
    """Return the ValueKind used to render a value.

    Order matters: bool is checked before numbers, containers before
    callables, and plain objects fall back to MAPPING when they expose
    their own attributes.
    """
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Real):
        return ValueKind.NUMBER
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.OPAQUE
    if isinstance(value, (Sequence, Set, deque)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Enum, BaseException, os.PathLike)):
        return ValueKind.OPAQUE
    if callable(value):
        return ValueKind.CALLABLE
    if _own_attributes(value) is not None:
        return ValueKind.MAPPING
    return ValueKind.OPAQUE


def serialize(value: Any, context: SerializeContext = SerializeContext.NONE) -> Any:
    """Serialize a value for a log line.

    Args:
        value: Anything passed to a logger method
        context: SerializeContext.NONE for a top-level argument, OBJECT or
            ARRAY when called for a container member

    Returns:
        At top level a str (or the number itself). Nested containers come
        back as list / dict so the outer call can encode them once.
    """
    return _serialize(value, context, set())


def render_args(args: Iterable[Any]) -> str:
    """Serialize each argument at top level and join them with single spaces."""
    return " ".join(str(serialize(arg)) for arg in args)


def _serialize(value: Any, context: SerializeContext, active: set[int]) -> Any:
    nested = context is not SerializeContext.NONE

    match classify(value):
        case ValueKind.STRING | ValueKind.NUMBER:
            return value

        case ValueKind.BOOLEAN:
            # Asymmetric on purpose: nested booleans are left to the JSON encoder
            return value if nested else BOOLEAN_PREFIX + _bool_text(value)

        case ValueKind.NULL:
            return NULL_TAG

        case ValueKind.UNDEFINED:
            return UNDEFINED_TAG

        case ValueKind.CALLABLE:
            return _summarize_callable(value)

        case ValueKind.SEQUENCE:
            if id(value) in active:
                return CIRCULAR_TAG
            active.add(id(value))
            try:
                items = [_serialize(item, SerializeContext.ARRAY, active) for item in value]
            finally:
                active.discard(id(value))
            if nested:
                return items
            return _encode(items)[1:-1]

        case ValueKind.MAPPING:
            if id(value) in active:
                return CIRCULAR_TAG
            active.add(id(value))
            try:
                obj: dict[str, Any] = {}
                for key, member in _members(value):
                    text = _key_text(key)
                    # 1 and "1" share a key once encoded; the first one wins
                    if text not in obj:
                        obj[text] = _serialize(member, SerializeContext.OBJECT, active)
            finally:
                active.discard(id(value))
            return obj if nested else _encode(obj)

        case ValueKind.OPAQUE:
            return repr(value) if isinstance(value, BaseException) else str(value)

        case _:
            raise AssertionError(f"Unhandled value kind for {type(value).__name__}")


def _summarize_callable(func: Any) -> str:
    """First line of a callable's source with the body summarized.

    Decorator lines are skipped. Callables without retrievable source fall
    back to repr(); if that text carries the built-in marker it is
    returned unchanged.
    """
    try:
        text = _signature_line(inspect.getsource(func).splitlines())
    except (OSError, TypeError, IndexError):
        text = repr(func)

    if NATIVE_MARKER in text:
        return text
    return _PARAMS_END.sub(CODE_PLACEHOLDER, text, count=1)


def _signature_line(lines: list[str]) -> str:
    """First `def`/`class` line, else the first line outside the decorators."""
    stripped = [line.strip() for line in lines]
    for line in stripped:
        if _DEFINITION.match(line):
            return line
    for line in stripped:
        if line and not line.startswith("@"):
            return line
    return stripped[0]


def _members(value: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return list(value.items())
    return list((_own_attributes(value) or {}).items())


def _own_attributes(value: Any) -> dict[str, Any] | None:
    """Instance attributes from __dict__ and __slots__, None if there are neither."""
    try:
        attrs: dict[str, Any] | None = dict(vars(value))
    except TypeError:
        attrs = None

    slots = [slot for cls in type(value).__mro__ for slot in _slot_names(cls)]
    for slot in slots:
        if slot in ("__dict__", "__weakref__") or not hasattr(value, slot):
            continue
        if attrs is None:
            attrs = {}
        attrs.setdefault(slot, getattr(value, slot))
    return attrs


def _slot_names(cls: type) -> tuple[str, ...]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def _key_text(key: Any) -> str:
    return key if isinstance(key, str) else str(key)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _encode(value: Any) -> str:
    """Compact JSON: no spaces after separators, non-ASCII kept as-is."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
