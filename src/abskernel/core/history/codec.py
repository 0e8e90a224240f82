from __future__ import annotations

import hashlib
from typing import Any, Sequence

import orjson


def encode_trace(trace: Sequence[Any]) -> bytes:
    """
    Canonical byte form of a replay trace.

    Keys are sorted and values orjson cannot serialize natively are
    rendered with str(), so equal traces always encode to equal bytes.
    """
    return orjson.dumps(list(trace), default=str, option=orjson.OPT_SORT_KEYS)


def trace_digest(trace: Sequence[Any]) -> str:
    """
    SHA-256 fingerprint of a replay trace (hex).
    """
    return hashlib.sha256(encode_trace(trace)).hexdigest()
