"""Op dispatch: run parsed ops against the line held by a session.

Each op maps to one extractor or inspection. Successful mutations are
recorded in the session's extraction log so they can be undone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from argline.formatter import REBUILT, VIEW, format_result, format_tokens, unknown_message
from argline.parsed_op import ParsedOp, ParseError, parse_op
from argline.quoting import unquote
from argline.session import LineSession
from argline.verb_registry import ARGLINE_VERBS, VerbRegistry

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})

registry = VerbRegistry()
registry.register_many(ARGLINE_VERBS)


@dataclass
class OpResult:
    """Result of dispatching a single op."""

    success: bool
    message: str
    prefix: str = ""
    value: str | None = None


def _wants_unquote(op: ParsedOp) -> bool:
    return op.params.get("unquote", "").lower() in _TRUTHY


def _op_positional(op: ParsedOp, session: LineSession) -> OpResult:
    if not op.positionals:
        return OpResult(False, "positional: missing INDEX")
    try:
        index = int(unquote(op.positionals[0]))
    except ValueError:
        return OpResult(False, f"positional: INDEX must be an integer, got {op.positionals[0]!r}")

    line = session.line
    before = line.snapshot()
    found, value = line.positional(index)
    if not found:
        return OpResult(False, f"No argument at position {index}")
    session.record("positional", str(index), before)
    if _wants_unquote(op):
        value = unquote(value)
    return OpResult(True, f"[{index}] {value}", value=value)


def _op_flag(op: ParsedOp, session: LineSession) -> OpResult:
    if not op.positionals:
        return OpResult(False, "flag: missing PATTERN")
    pattern = op.positionals[0]
    line = session.line
    before = line.snapshot()
    if not line.flag(pattern):
        return OpResult(False, f"Flag {pattern!r} not present")
    session.record("flag", pattern, before)
    return OpResult(True, f"Flag {pattern!r} present", value="true")


def _op_named(op: ParsedOp, session: LineSession) -> OpResult:
    if not op.positionals:
        return OpResult(False, "named: missing PATTERN")
    pattern = op.positionals[0]
    line = session.line
    before = line.snapshot()
    found, value = line.named(pattern)
    if not found:
        return OpResult(False, f"Named argument {pattern!r} not present")
    session.record("named", pattern, before)
    if _wants_unquote(op):
        value = unquote(value)
    return OpResult(True, f"{pattern} = {value}", value=value)


def _op_reparse(op: ParsedOp, session: LineSession) -> OpResult:
    line = session.line
    before = line.snapshot()
    line.reparse()
    session.record("reparse", "", before)
    return OpResult(True, f"Reparsed into {len(line.tokens)} token(s)", prefix=REBUILT)


def _op_remaining(op: ParsedOp, session: LineSession) -> OpResult:
    remaining = session.line.remaining
    return OpResult(True, repr(remaining), prefix=VIEW, value=remaining)


def _op_tokens(op: ParsedOp, session: LineSession) -> OpResult:
    return OpResult(True, "\n" + format_tokens(session.line.tokens), prefix=VIEW)


_HANDLERS = {
    "positional": _op_positional,
    "flag": _op_flag,
    "named": _op_named,
    "reparse": _op_reparse,
    "remaining": _op_remaining,
    "tokens": _op_tokens,
}


def execute_op(op: ParsedOp, session: LineSession) -> OpResult:
    """Execute a parsed op against the session's loaded line."""
    if session.line is None:
        return OpResult(False, "No line loaded. Use session 'load ...' first.")

    spec = registry.lookup(op.verb)
    handler = _HANDLERS.get(op.verb)
    if spec is None or handler is None:
        known = [v.verb for v in registry.verbs]
        return OpResult(False, unknown_message("verb", op.verb, known))

    unexpected = sorted(set(op.params) - set(spec.params))
    if unexpected:
        allowed = ", ".join(f"{p}:" for p in spec.params) or "none"
        return OpResult(
            False,
            f"{op.verb}: unknown param(s) {', '.join(unexpected)} (allowed: {allowed})",
        )

    logger.debug("executing %r", op.raw or op.verb)
    try:
        return handler(op, session)
    except re.error as exc:
        return OpResult(False, f"Invalid pattern {op.positionals[0]!r}: {exc}")


def execute_ops(op_strings: list[str], session: LineSession) -> list[str]:
    """Parse and execute a batch of op strings, one result line each.

    Ops run in order; a failing op does not stop the batch.
    """
    results: list[str] = []
    for op_str in op_strings:
        parsed = parse_op(op_str)
        if isinstance(parsed, ParseError):
            results.append(format_result(False, parsed.error))
            continue
        result = execute_op(parsed, session)
        results.append(format_result(result.success, result.message, result.prefix))
    return results


def run_query(query: str, session: LineSession) -> str:
    """Answer a read-only query: ``tokens``, ``remaining`` or ``arguments``."""
    if session.line is None:
        return format_result(False, "No line loaded.")

    q = query.strip().lower()
    match q:
        case "tokens":
            return format_tokens(session.line.tokens)
        case "remaining":
            return session.line.remaining
        case "arguments":
            return "\n".join(session.line.arguments)
        case _:
            return format_result(False, f"Unknown query {query!r}")


def reference_card(extra_sections: dict[str, str] | None = None) -> str:
    """Reference card for every registered verb."""
    return registry.generate_reference_card(extra_sections)
