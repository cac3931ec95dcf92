"""Report tokenization and token-range selection."""

from .selection import (
    SelectionModel,
    SelectionPhase,
    SelectionRangeError,
    SelectionState,
    TokenRange,
)
from .tokens import SEPARATORS, Token, TokenKind, join_tokens, span_text, tokenize

__all__ = [
    "SEPARATORS",
    "Token",
    "TokenKind",
    "tokenize",
    "join_tokens",
    "span_text",
    "SelectionModel",
    "SelectionPhase",
    "SelectionRangeError",
    "SelectionState",
    "TokenRange",
]
