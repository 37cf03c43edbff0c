"""Fingerprint generation for cacheable AI calls.

Keys and digests come from a 31-multiplier rolling hash wrapped to a
signed 32-bit accumulator. It is fast and deterministic within a process,
but it is NOT collision resistant: two different requests can share a key
and one caller would then read the other's result. That risk is accepted.
The same weakness makes `digest_similarity` a structural proxy only.
"""

import json
from typing import Any

KEY_NAMESPACE = "ai"

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def rolling_hash(text: str) -> int:
    """Hash text as `h = h * 31 + unit` over its UTF-16 code units.

    Returns:
        The accumulator as a signed 32-bit integer.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + unit) & _UINT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return value


def serialize_params(params: dict[str, Any] | None) -> str:
    """Compact JSON with sorted keys, or "" when there are no params."""
    if params is None:
        return ""
    return json.dumps(params, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)


def cache_key(function_name: str, content: str, params: dict[str, Any] | None = None) -> str:
    """Build the cache key for one (function, content, params) request.

    Args:
        function_name: Logical AI function, e.g. "polish_text"
        content: Raw input content sent to the model
        params: Optional call parameters

    Returns:
        Key of the form "ai:<function_name>:<abs(hash)>"
    """
    combined = f"{function_name}:{content}:{serialize_params(params)}"
    return f"{KEY_NAMESPACE}:{function_name}:{abs(rolling_hash(combined))}"


def content_digest(content: str) -> str:
    """Digest of the content alone, as a decimal string."""
    return str(abs(rolling_hash(content)))


def digest_similarity(first: str, second: str) -> float:
    """Position-wise similarity of two digest strings.

    Positions are compared up to the longer length; a missing character
    counts as a mismatch. Identical digests score 1.0.
    """
    if first == second:
        return 1.0

    max_length = max(len(first), len(second))
    mismatches = 0
    for i in range(max_length):
        left = first[i] if i < len(first) else None
        right = second[i] if i < len(second) else None
        if left != right:
            mismatches += 1

    return 1 - mismatches / max_length
