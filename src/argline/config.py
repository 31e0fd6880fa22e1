"""Tokenizer configuration.

A :class:`TokenizerConfig` is passed explicitly to every function that needs
to know which characters separate arguments, open a quote, or escape one.
``None`` always means :data:`DEFAULT_CONFIG`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenizerConfig:
    """Characters that drive scanning.

    Whitespace always separates arguments. *separators* adds further
    separator characters, e.g. ``"="`` so that ``--out=file`` splits into
    ``--out``, ``=`` and ``file``.
    """

    separators: str = ""
    quote: str = '"'
    escape: str = "\\"

    def __post_init__(self) -> None:
        if len(self.quote) != 1:
            raise ValueError(f"quote must be a single character, got {self.quote!r}")
        if len(self.escape) != 1:
            raise ValueError(f"escape must be a single character, got {self.escape!r}")
        if self.quote == self.escape:
            raise ValueError("quote and escape characters must differ")
        for ch in (self.quote, self.escape):
            if self.is_separator_char(ch):
                raise ValueError(f"{ch!r} cannot be both a separator and a quote/escape")

    def is_separator_char(self, ch: str) -> bool:
        """Return True if *ch* separates arguments."""
        return ch.isspace() or ch in self.separators

    def is_separator(self, text: str) -> bool:
        """Return True if *text* is a non-empty run of separator characters."""
        return bool(text) and all(self.is_separator_char(ch) for ch in text)


DEFAULT_CONFIG = TokenizerConfig()

# Splits ``--name=value`` into name, separator and value tokens.
EQUALS_SEPARATED = TokenizerConfig(separators="=")


def resolve(config: TokenizerConfig | None) -> TokenizerConfig:
    """Return *config*, or :data:`DEFAULT_CONFIG` when it is None."""
    return DEFAULT_CONFIG if config is None else config
