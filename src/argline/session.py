"""Session lifecycle: load, show, checkpoint, undo, redo.

A :class:`LineSession` owns the command line currently being picked apart
and the log of extractions applied to it. Session actions are plain
strings, tokenized with argline itself.
"""

from __future__ import annotations

import logging

from argline.arguments import ArgumentLine
from argline.config import TokenizerConfig, resolve
from argline.event_log import ExtractionEvent, ExtractionLog
from argline.formatter import format_result, format_tokens, unknown_message
from argline.quoting import unquote
from argline.tokenizer import tokenize

logger = logging.getLogger(__name__)

SESSION_ACTIONS = ["load", "show", "checkpoint", "undo", "redo"]


class LineSession:
    """Routes session actions and keeps the extraction log.

    Handles checkpoint/undo/redo by restoring the token snapshots stored
    in each :class:`ExtractionEvent`.
    """

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        self._config = resolve(config)
        self._line: ArgumentLine | None = None
        self._log = ExtractionLog()

    @property
    def line(self) -> ArgumentLine | None:
        """The loaded line, or None if nothing is loaded."""
        return self._line

    @property
    def log(self) -> ExtractionLog:
        return self._log

    def load(self, raw: str) -> ArgumentLine:
        """Start over with *raw*; the extraction log is reset."""
        self._line = ArgumentLine(raw, self._config)
        self._log = ExtractionLog()
        logger.info("loaded line with %d token(s)", len(self._line.tokens))
        return self._line

    def record(self, verb: str, detail: str, before: list[str]) -> None:
        """Log a mutation of the loaded line; *before* is its prior snapshot."""
        if self._line is None:
            raise RuntimeError("no line loaded")
        self._log.append(
            ExtractionEvent(
                verb=verb, detail=detail, before=before, after=self._line.snapshot()
            )
        )

    def split_action(self, action: str) -> tuple[str, str]:
        """Split *action* into its lower-cased verb and the text after it.

        Exactly one separator character after the verb is consumed; the
        rest is returned verbatim, so ``load`` sees leading and trailing
        whitespace of the line.
        """
        body = action.lstrip()
        end = 0
        while end < len(body) and not self._config.is_separator_char(body[end]):
            end += 1
        return body[:end].lower(), body[end + 1 :]

    def dispatch(self, action: str) -> str:
        """Route a session action string to the appropriate handler."""
        command, rest = self.split_action(action)

        match command:
            case "load":
                return self._handle_load(rest)
            case "show":
                return self._handle_show()
            case "checkpoint":
                return self._handle_checkpoint(rest)
            case "undo":
                return self._handle_undo(rest)
            case "redo":
                return self._handle_redo()
            case _:
                return format_result(
                    False, unknown_message("session action", command, SESSION_ACTIONS)
                )

    def _handle_load(self, raw: str) -> str:
        line = self.load(raw)
        count = len(line.arguments)
        return format_result(True, f"Loaded {count} argument(s): {line.remaining!r}")

    def _handle_show(self) -> str:
        if self._line is None:
            return format_result(False, "No line loaded")
        return "\n".join(
            [
                format_result(True, f"Remaining: {self._line.remaining!r}"),
                format_tokens(self._line.tokens),
            ]
        )

    def _handle_checkpoint(self, rest: str) -> str:
        name = unquote(rest.strip())
        if not name:
            return format_result(False, "Missing checkpoint name")
        if self._line is None:
            return format_result(False, "No line loaded")
        self._log.checkpoint(name)
        return format_result(
            True, f"Checkpoint '{name}' created (at event #{self._log.cursor})"
        )

    def _handle_undo(self, rest: str) -> str:
        if self._line is None:
            return format_result(False, "No line loaded")

        to_name: str | None = None
        for arg in tokenize(rest):
            if arg.startswith("to:"):
                to_name = unquote(arg[3:])

        if to_name:
            undone = self._log.undo_to(to_name)
            if undone is None:
                return format_result(False, f"No checkpoint named {to_name!r}")
        else:
            undone = self._log.undo()

        if not undone:
            return format_result(False, "Nothing to undo")

        # Oldest undone event holds the state to return to
        self._line.restore(undone[-1].before)
        logger.debug("undid %d event(s)", len(undone))
        if to_name:
            return format_result(
                True, f"Undone {len(undone)} event(s) to checkpoint '{to_name}'"
            )
        return format_result(True, f"Undone {len(undone)} event(s)")

    def _handle_redo(self) -> str:
        if self._line is None:
            return format_result(False, "No line loaded")

        replayed = self._log.redo()
        if not replayed:
            return format_result(False, "Nothing to redo")

        self._line.restore(replayed[-1].after)
        logger.debug("redid %d event(s)", len(replayed))
        return format_result(True, f"Redone {len(replayed)} event(s)")
