"""Compact response formatting for argline tool outputs.

Every reply line starts with a one-character outcome marker:

``+``  an extraction matched and its tokens were cleared
``!``  nothing matched, or the request was rejected
``*``  the token list was rebuilt (reparse)
``=``  a read-only view of the line
"""

from __future__ import annotations

import difflib

MATCHED = "+"
FAILED = "!"
REBUILT = "*"
VIEW = "="


def format_result(success: bool, message: str, prefix: str = "") -> str:
    """Format a result line.

    *prefix* overrides the marker; otherwise ``+`` or ``!`` is picked from
    *success*. Continuation lines of a multi-line message are left as-is.
    """
    marker = prefix or (MATCHED if success else FAILED)
    return f"{marker} {message}"


def format_tokens(tokens: list[str]) -> str:
    """Render a token list one slot per line.

    Cleared slots show as ``<cleared>`` so stale positions stay visible.
    """
    if not tokens:
        return "(no tokens)"
    width = len(str(len(tokens) - 1))
    lines = []
    for i, text in enumerate(tokens):
        shown = repr(text) if text else "<cleared>"
        lines.append(f"[{i:>{width}}] {shown}")
    return "\n".join(lines)


def suggest(word: str, candidates: list[str]) -> str | None:
    """Closest candidate to *word* (case-insensitive), or None."""
    lowered = {c.lower(): c for c in candidates}
    matches = difflib.get_close_matches(word.lower(), list(lowered), n=1, cutoff=0.6)
    return lowered[matches[0]] if matches else None


def unknown_message(kind: str, word: str, candidates: list[str]) -> str:
    """Message for an unrecognised *kind* name, with a hint when one is close.

    >>> unknown_message("verb", "flg", ["flag", "named"])
    "Unknown verb 'flg' (did you mean 'flag'?)"
    """
    message = f"Unknown {kind} {word!r}"
    hint = suggest(word, candidates)
    if hint:
        message += f" (did you mean {hint!r}?)"
    return message
