"""Extract and remove arguments from a token list.

All extractors work on the list returned by :func:`~argline.tokenizer.tokenize`
and edit it in place. Matched tokens are cleared to ``""`` rather than
deleted, so list positions stay put within one extraction. After a
pattern-based extraction, call :func:`~argline.tokenizer.reparse` before
relying on positional indices again.

Not finding something is a normal outcome and is reported through the return
value. An invalid regular expression raises :class:`re.error`.
"""

from __future__ import annotations

import logging
import re
from typing import Union

from argline.config import TokenizerConfig, resolve
from argline.tokenizer import collapse, reparse, tokenize, tokenize_with_meta

logger = logging.getLogger(__name__)

Pattern = Union[str, re.Pattern]


def _compile(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    return re.compile(pattern, re.IGNORECASE)


def _is_candidate(text: str, cfg: TokenizerConfig) -> bool:
    """Only non-empty argument tokens are tested against patterns."""
    return bool(text) and not cfg.is_separator(text)


def get_positional(
    tokens: list[str], index: int, config: TokenizerConfig | None = None
) -> tuple[bool, str]:
    """Take the argument at zero-based *index* out of *tokens*.

    The argument slot and the separator after it are cleared. Returns
    ``(found, value)``; ``(False, "")`` when the index is out of range.
    """
    cfg = resolve(config)
    offset = 1 if tokens and cfg.is_separator(tokens[0]) else 0
    pos = offset + index * 2
    if index < 0 or pos >= len(tokens):
        return False, ""

    value, tokens[pos] = tokens[pos], ""
    if pos + 1 < len(tokens):
        tokens[pos + 1] = ""
    logger.debug("positional %d -> %r", index, value)
    return True, value


def get_flag(
    tokens: list[str], pattern: Pattern, config: TokenizerConfig | None = None
) -> bool:
    """Remove the first argument matching *pattern*, ignoring case.

    The whole token must match. The token after the flag (its trailing
    separator) is cleared too.
    """
    cfg = resolve(config)
    regex = _compile(pattern)
    for i, text in enumerate(tokens):
        if _is_candidate(text, cfg) and regex.fullmatch(text):
            tokens[i] = ""
            if i + 1 < len(tokens):
                tokens[i + 1] = ""
            logger.debug("flag %r matched %r", regex.pattern, text)
            return True
    return False


def get_named(
    tokens: list[str], pattern: Pattern, config: TokenizerConfig | None = None
) -> tuple[bool, str]:
    """Remove the first argument matching *pattern* along with its value.

    A match only counts when a separator and a value token follow it; a
    match at the end of the line is skipped and the search goes on. The
    name, the separator, the value and the separator after the value are
    cleared. Returns ``(found, value)``.
    """
    cfg = resolve(config)
    regex = _compile(pattern)
    for i, text in enumerate(tokens):
        if not (_is_candidate(text, cfg) and regex.fullmatch(text)):
            continue
        if i + 2 >= len(tokens):
            logger.debug("named %r matched %r with no value", regex.pattern, text)
            continue
        value = tokens[i + 2]
        tokens[i] = tokens[i + 1] = tokens[i + 2] = ""
        if i + 3 < len(tokens):
            tokens[i + 3] = ""
        logger.debug("named %r matched %r -> %r", regex.pattern, text, value)
        return True, value
    return False, ""


class ArgumentLine:
    """A token list for one command line, plus the config used to build it.

    Convenience wrapper around the module-level extractors::

        line = ArgumentLine('app.exe --out "my file.txt" -v input')
        line.flag("-v|--verbose")      # True
        line.named("--out")            # (True, '"my file.txt"')
        line.reparse()
        line.positional(1)             # (True, 'input')
    """

    def __init__(self, raw: str = "", config: TokenizerConfig | None = None) -> None:
        self._config = resolve(config)
        self.tokens: list[str] = tokenize(raw, self._config)

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    @property
    def remaining(self) -> str:
        """The line as it stands after extractions."""
        return collapse(self.tokens)

    @property
    def arguments(self) -> list[str]:
        """Argument tokens still present, in order."""
        return [
            t.text
            for t in tokenize_with_meta(self.remaining, self._config)
            if t.is_argument
        ]

    def positional(self, index: int) -> tuple[bool, str]:
        return get_positional(self.tokens, index, self._config)

    def flag(self, pattern: Pattern) -> bool:
        return get_flag(self.tokens, pattern, self._config)

    def named(self, pattern: Pattern) -> tuple[bool, str]:
        return get_named(self.tokens, pattern, self._config)

    def reparse(self) -> None:
        """Re-tokenize the remaining line so positions are current."""
        self.tokens = reparse(self.tokens, self._config)

    def snapshot(self) -> list[str]:
        return list(self.tokens)

    def restore(self, tokens: list[str]) -> None:
        self.tokens = list(tokens)

    def __repr__(self) -> str:
        return f"ArgumentLine({self.remaining!r})"
