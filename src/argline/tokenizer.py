"""Lossless, quote-aware tokenizer for raw command lines.

Splits a command line into argument tokens and the separator runs between
them. Nothing is dropped: joining the tokens gives back the input exactly,
for any input, including unterminated and escaped quotes.

Example::

    'arg1  arg2 "arg 3"   arg"4'  ->  ['arg1', '  ', 'arg2', ' ', '"arg 3"', '   ', 'arg"4']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from argline.config import TokenizerConfig
from argline.scanner import scan


@dataclass
class Token:
    """A token together with its kind."""

    text: str
    is_argument: bool


def tokenize_with_meta(
    raw: str, config: TokenizerConfig | None = None
) -> list[Token]:
    """Split *raw* into argument and separator tokens.

    Words are merged into one argument while quote parity is odd, so the
    separator text inside a quoted argument belongs to the argument. An
    argument whose quote never closes runs to the end of the string.
    Never raises.
    """
    tokens: list[Token] = []
    prev_end = 0  # end of the last emitted argument
    arg_start: int | None = None
    parity = 0

    for word in scan(raw, config):
        if arg_start is None:
            arg_start = word.start
        parity += word.boundary_quotes(arg_start)
        if parity % 2 == 0:
            if prev_end < arg_start:
                tokens.append(Token(raw[prev_end:arg_start], False))
            tokens.append(Token(raw[arg_start:word.end], True))
            prev_end = word.end
            arg_start = None

    if arg_start is not None:
        # Unterminated quote: the rest of the line is one argument
        if prev_end < arg_start:
            tokens.append(Token(raw[prev_end:arg_start], False))
        tokens.append(Token(raw[arg_start:], True))
    elif prev_end < len(raw):
        tokens.append(Token(raw[prev_end:], False))

    return tokens


def tokenize(raw: str, config: TokenizerConfig | None = None) -> list[str]:
    """Split *raw* into a list of token strings.

    Examples
    --------
    >>> tokenize('run "a b" --x')
    ['run', ' ', '"a b"', ' ', '--x']
    >>> tokenize('arg"4')
    ['arg"4']
    """
    return [t.text for t in tokenize_with_meta(raw, config)]


def collapse(tokens: Iterable[Union[str, Token]]) -> str:
    """Join *tokens* back into a single string.

    ``collapse(tokenize(s)) == s`` for every ``s``. Cleared tokens are empty
    strings and contribute nothing.
    """
    return "".join(t.text if isinstance(t, Token) else t for t in tokens)


def reparse(
    tokens: Iterable[Union[str, Token]], config: TokenizerConfig | None = None
) -> list[str]:
    """Collapse *tokens* and tokenize the result again.

    Cleared slots disappear, so positional indices describe the line as it
    is now. Returns a new list.
    """
    return tokenize(collapse(tokens), config)
