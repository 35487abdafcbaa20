"""
Token Estimation
================

The chat-completions service has no counting endpoint, so token counts
are approximated from character length (about four characters per token
for English text). The result is an estimate, not a tokenizer count.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from content_bridge.core import CountTokensRequest, CountTokensResponse, Default

from .converters import stringify_content


def estimate_tokens(contents: Iterable[Any] | None) -> int:
    """
    Approximate the token count of ``contents``.

    Items are rendered as text (JSON for non-strings), joined with single
    spaces, and the length is divided by four, rounding up.
    """
    if not contents:
        return 0
    text = " ".join(stringify_content(content) for content in contents)
    return math.ceil(len(text) / Default.CHARS_PER_TOKEN)


def count_tokens(request: CountTokensRequest | Mapping[str, Any]) -> CountTokensResponse:
    """Estimated token count for a legacy ``countTokens`` request."""
    if not isinstance(request, CountTokensRequest):
        request = CountTokensRequest.model_validate(request)
    return CountTokensResponse(total_tokens=estimate_tokens(request.contents))
