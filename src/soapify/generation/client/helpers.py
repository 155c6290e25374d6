from __future__ import annotations

import keyword
import re
from typing import Iterable

_WORD_SPLIT = re.compile(r"[\s_]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
FALLBACK_METHOD_NAME = "operation"


def normalize_method_name(
    wire_name: str,
    style: str = "camel",
    reserved: Iterable[str] = (),
) -> str:
    """Convert a remote operation name to a Python method name.

    Characters that are not allowed in identifiers are dropped and act as word
    separators. Keywords and reserved member names get a trailing underscore.

    Example:
        >>> normalize_method_name("GetUser")
        'getUser'
        >>> normalize_method_name("get-user.v2")
        'getUserV2'
        >>> normalize_method_name("GetUser", style="snake")
        'get_user'
    """
    cleaned = "".join(ch if ("_" + ch).isidentifier() else " " for ch in wire_name)
    words = [word for word in _WORD_SPLIT.split(cleaned) if word]
    if not words:
        return FALLBACK_METHOD_NAME
    if style == "snake":
        parts: list[str] = []
        for word in words:
            parts.extend(piece.lower() for piece in _CAMEL_BOUNDARY.split(word) if piece)
        name = "_".join(parts)
    else:
        head, *tail = words
        name = head[:1].lower() + head[1:] + "".join(word[:1].upper() + word[1:] for word in tail)
    if not name.isidentifier():
        name = f"_{name}"
    if not name.isidentifier():
        return FALLBACK_METHOD_NAME
    if keyword.iskeyword(name) or name in set(reserved):
        name = f"{name}_"
    return name
