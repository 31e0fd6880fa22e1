"""Op-string parser for the argline tool surface.

Op strings are split with argline's own tokenizer. Positionals are kept
verbatim, quotes included, so ``flag "--no cache"`` carries the pattern
``"--no cache"`` and matches the quoted argument as it appears in the line.
Produces a :class:`ParsedOp` on success or a :class:`ParseError` on failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from argline.quoting import unquote
from argline.tokenizer import tokenize_with_meta


@dataclass
class ParsedOp:
    """Successfully parsed operation."""

    verb: str
    positionals: list[str] = field(default_factory=list)
    params: dict[str, str] = field(default_factory=dict)
    raw: str = ""


@dataclass
class ParseError:
    """Parsing failure."""

    success: bool = field(default=False, init=False)
    error: str = ""
    raw: str = ""


def is_key_value(token: str) -> bool:
    """Return True if *token* looks like ``key:value``.

    The key must be a bare word, so regex patterns such as ``(?i:x)`` or
    ``--a:b`` stay positional.
    """
    key, sep, _ = token.partition(":")
    return bool(sep) and key.isidentifier()


def parse_key_value(token: str) -> tuple[str, str]:
    """Split *token* on the first ``:`` and return ``(key, value)``."""
    key, _, value = token.partition(":")
    return key.lower(), unquote(value)


def parse_op(op_string: str) -> ParsedOp | ParseError:
    """Parse an op string into a structured :class:`ParsedOp`.

    First token becomes the verb (lower-cased). Quoted tokens are always
    positional and keep their quotes. Bare ``key:value`` tokens become
    params; everything else is a positional, in order.

    >>> parse_op('named "--out|-o" unquote:yes').params
    {'unquote': 'yes'}
    """
    raw = op_string.strip()
    if not raw:
        return ParseError(error="Empty op string", raw=raw)

    args = [t.text for t in tokenize_with_meta(raw) if t.is_argument]
    if not args:
        return ParseError(error="No tokens after tokenization", raw=raw)

    verb = unquote(args[0]).lower()
    positionals: list[str] = []
    params: dict[str, str] = {}

    for text in args[1:]:
        if not text.startswith('"') and is_key_value(text):
            k, v = parse_key_value(text)
            params[k] = v
        else:
            positionals.append(text)

    return ParsedOp(verb=verb, positionals=positionals, params=params, raw=raw)
