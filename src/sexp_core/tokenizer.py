"""Tokenizer: splits raw source text into a queue of tokens."""

from __future__ import annotations

from collections import deque


def tokenize(text: str) -> deque[str]:
    """Pad every parenthesis with a space and split on whitespace.

    ``"(+ 1 2)"`` → ``deque(["(", "+", "1", "2", ")"])``
    """
    padded = text.replace("(", " ( ").replace(")", " ) ")
    return deque(padded.split())
