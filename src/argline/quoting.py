"""Helpers for the raw text returned by the extractors.

Extractors hand back arguments verbatim, quotes included. These helpers
strip or unescape them when the caller wants the plain value.
"""

from __future__ import annotations


def unescape_quotes(text: str, quote: str = '"', escape: str = "\\") -> str:
    """Replace every escaped quote (``\\"``) with a plain quote."""
    return text.replace(escape + quote, quote)


def trim_quotes(text: str, quote: str = '"') -> str:
    """Strip one pair of surrounding quotes.

    Text that does not both start and end with *quote* (including a lone
    quote character) is returned unchanged.
    """
    if len(text) >= 2 and text[0] == quote and text[-1] == quote:
        return text[1:-1]
    return text


def unquote(text: str, quote: str = '"', escape: str = "\\") -> str:
    """Trim surrounding quotes, then unescape inner ones.

    >>> unquote('"say \\\\"hi\\\\""')
    'say "hi"'
    """
    return unescape_quotes(trim_quotes(text, quote), quote, escape)
