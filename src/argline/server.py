"""argline server factory: creates a fully wired MCP server.

Registers 4 tools: ``argline``, ``argline_query``, ``argline_session`` and
``argline_help``. Embeds the reference card in the main tool description.
"""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from argline.config import TokenizerConfig
from argline.ops import execute_ops, reference_card, registry, run_query
from argline.session import LineSession

logger = logging.getLogger(__name__)

QUOTING_NOTES = (
    'A bare double quote starts or ends one argument: "my file.txt".\n'
    'A quote after a backslash is literal: \\"\n'
    "Quotes inside a word are ordinary characters: arg\"4\n"
    'Quote a pattern to match a quoted argument: flag "--no cache"\n'
    "Values come back verbatim; add unquote:yes to strip quotes."
)


def _build_tool_description(extra_sections: dict[str, str] | None = None) -> str:
    """Build the inline tool description embedding the verb list."""
    lines: list[str] = [
        "Extract arguments from the loaded command line. Each op string "
        "follows: VERB [ARG] [key:value ...]\n"
        "Load a line first with argline_session 'load <command line>'. "
        "Call argline_help for the full reference card.\n"
    ]
    for v in registry.verbs:
        lines.append(f"  {v.syntax}")
    lines.append("")

    if extra_sections:
        for title, content in extra_sections.items():
            lines.append(f"{title.upper()}:")
            lines.append(content)
            lines.append("")

    return "\n".join(lines)


def create_argline_server(
    *,
    config: TokenizerConfig | None = None,
    extra_sections: dict[str, str] | None = None,
    **kwargs,
) -> FastMCP:
    """Create a fully wired MCP server around one :class:`LineSession`.

    Parameters
    ----------
    config : TokenizerConfig | None
        Tokenizer configuration for every line loaded in the session.
    extra_sections : dict[str, str] | None
        Additional sections for the reference card.
    **kwargs
        Additional arguments passed to the FastMCP constructor.
    """
    session = LineSession(config)
    sections = {"Quoting": QUOTING_NOTES, **(extra_sections or {})}

    kwargs.setdefault("name", "argline")
    mcp = FastMCP(**kwargs)

    tool_description = _build_tool_description(sections)
    card = reference_card(sections)

    @mcp.tool(name="argline", description=tool_description, structured_output=False)
    def execute(ops: list[str]) -> TextContent:
        logger.debug("batch of %d op(s)", len(ops))
        return TextContent(type="text", text="\n".join(execute_ops(ops, session)))

    @mcp.tool(name="argline_query", structured_output=False)
    def query(q: str) -> TextContent:
        """Query the loaded line: 'tokens', 'remaining' or 'arguments'."""
        return TextContent(type="text", text=run_query(q, session))

    @mcp.tool(name="argline_session", structured_output=False)
    def session_action(action: str) -> TextContent:
        """Session: 'load <command line>', 'show', 'checkpoint v1', 'undo', 'undo to:v1', 'redo'"""
        return TextContent(type="text", text=session.dispatch(action))

    @mcp.tool(name="argline_help", structured_output=False)
    def get_help() -> str:
        """Returns the argline reference card with all syntax."""
        return card

    return mcp
