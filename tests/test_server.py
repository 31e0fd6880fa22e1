"""Tests for argline.server and the command-line entry point."""

import asyncio
import json

from argline.__main__ import main
from argline.server import _build_tool_description, create_argline_server


class TestServer:
    def test_registers_four_tools(self):
        mcp = create_argline_server()
        names = {tool.name for tool in asyncio.run(mcp.list_tools())}
        assert names == {"argline", "argline_query", "argline_session", "argline_help"}

    def test_tool_description_lists_verbs(self):
        description = _build_tool_description({"Quoting": "bare double quotes"})
        assert "positional INDEX" in description
        assert "QUOTING:" in description
        assert "argline_session 'load <command line>'" in description


class TestMain:
    def test_tokenize(self, capsys):
        assert main(["tokenize", 'a  "b c"']) == 0
        assert json.loads(capsys.readouterr().out) == ["a", "  ", '"b c"']

    def test_tokenize_meta(self, capsys):
        assert main(["tokenize", "--meta", "a b"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload[1] == {"text": " ", "argument": False}

    def test_separators(self, capsys):
        assert main(["--separators", "=", "tokenize", "k=v"]) == 0
        assert json.loads(capsys.readouterr().out) == ["k", "=", "v"]

    def test_invalid_separators(self):
        assert main(["--separators", '"', "tokenize", "x"]) == 2
