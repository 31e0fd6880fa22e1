"""Word and quote scanner.

A single forward pass over the raw line that reports every maximal run of
non-separator characters together with the positions of the unescaped
quote characters inside it. The tokenizer decides from these spans where
arguments begin and end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from argline.config import TokenizerConfig, resolve


@dataclass(frozen=True)
class Word:
    """A run of non-separator characters, ``raw[start:end]``."""

    start: int
    end: int
    quotes: tuple[int, ...] = field(default_factory=tuple)

    def boundary_quotes(self, arg_start: int) -> int:
        """Count the quotes that affect quote parity.

        A quote counts when it opens the argument being assembled (it sits
        at *arg_start*) or when it is the last character of this word.
        Quotes anywhere else are part of the text.
        """
        last = self.end - 1
        return sum(1 for pos in self.quotes if pos == arg_start or pos == last)


def scan(raw: str, config: TokenizerConfig | None = None) -> Iterator[Word]:
    """Yield the words of *raw* in order.

    Examples
    --------
    >>> [(w.start, w.end, w.quotes) for w in scan('a  "b c"')]
    [(0, 1, ()), (3, 5, (3,)), (6, 8, (7,))]
    """
    cfg = resolve(config)
    start: int | None = None
    quotes: list[int] = []
    escapes = 0  # length of the current run of escape characters

    for i, ch in enumerate(raw):
        if cfg.is_separator_char(ch):
            if start is not None:
                yield Word(start, i, tuple(quotes))
                start = None
                quotes = []
            escapes = 0
            continue

        if start is None:
            start = i
        if ch == cfg.quote and escapes % 2 == 0:
            quotes.append(i)
        escapes = escapes + 1 if ch == cfg.escape else 0

    if start is not None:
        yield Word(start, len(raw), tuple(quotes))
