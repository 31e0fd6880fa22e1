"""Tests for argline.ops."""

from argline.ops import execute_op, execute_ops, reference_card, run_query
from argline.parsed_op import ParsedOp
from argline.session import LineSession


def _session(raw: str = 'app.exe --out "my file.txt" -v input') -> LineSession:
    session = LineSession()
    session.load(raw)
    return session


class TestExecuteOp:
    def test_no_line_loaded(self):
        result = execute_op(ParsedOp(verb="flag", positionals=["-v"]), LineSession())
        assert result.success is False
        assert "No line loaded" in result.message

    def test_positional(self):
        session = _session("a b")
        result = execute_op(ParsedOp(verb="positional", positionals=["1"]), session)
        assert result.success is True
        assert result.value == "b"
        assert len(session.log) == 1

    def test_positional_unquote(self):
        session = _session('app "my file.txt"')
        op = ParsedOp(verb="positional", positionals=["1"], params={"unquote": "yes"})
        assert execute_op(op, session).value == "my file.txt"

    def test_positional_out_of_range_not_logged(self):
        session = _session("a")
        result = execute_op(ParsedOp(verb="positional", positionals=["4"]), session)
        assert result.success is False
        assert len(session.log) == 0

    def test_positional_bad_index(self):
        result = execute_op(ParsedOp(verb="positional", positionals=["x"]), _session())
        assert result.success is False
        assert "integer" in result.message

    def test_positional_missing_index(self):
        result = execute_op(ParsedOp(verb="positional"), _session())
        assert result.success is False

    def test_flag(self):
        session = _session()
        result = execute_op(ParsedOp(verb="flag", positionals=["-v|--verbose"]), session)
        assert result.success is True
        assert session.line.remaining == 'app.exe --out "my file.txt" input'

    def test_flag_absent(self):
        session = _session()
        result = execute_op(ParsedOp(verb="flag", positionals=["--quiet"]), session)
        assert result.success is False
        assert len(session.log) == 0

    def test_named_unquote(self):
        session = _session()
        op = ParsedOp(verb="named", positionals=["--out"], params={"unquote": "true"})
        result = execute_op(op, session)
        assert result.success is True
        assert result.value == "my file.txt"
        assert session.line.remaining == "app.exe -v input"

    def test_named_without_value(self):
        session = _session("app --out")
        result = execute_op(ParsedOp(verb="named", positionals=["--out"]), session)
        assert result.success is False
        assert session.line.remaining == "app --out"

    def test_invalid_pattern_reported(self):
        result = execute_op(ParsedOp(verb="flag", positionals=["("]), _session())
        assert result.success is False
        assert "Invalid pattern" in result.message

    def test_unknown_verb_suggests(self):
        result = execute_op(ParsedOp(verb="flg", positionals=["-v"]), _session())
        assert result.success is False
        assert "did you mean 'flag'" in result.message

    def test_unknown_param_rejected(self):
        session = _session()
        op = ParsedOp(verb="flag", positionals=["-v"], params={"unquote": "yes"})
        result = execute_op(op, session)
        assert result.success is False
        assert "unknown param(s) unquote" in result.message
        assert "allowed: none" in result.message
        assert len(session.log) == 0
        assert "-v" in session.line.remaining

    def test_quoted_index(self):
        result = execute_op(ParsedOp(verb="positional", positionals=['"1"']), _session("a b"))
        assert result.value == "b"

    def test_reparse_is_logged(self):
        session = _session("a b c")
        execute_op(ParsedOp(verb="positional", positionals=["0"]), session)
        result = execute_op(ParsedOp(verb="reparse"), session)
        assert result.prefix == "*"
        assert session.line.tokens == ["b", " ", "c"]
        assert len(session.log) == 2

    def test_remaining(self):
        result = execute_op(ParsedOp(verb="remaining"), _session("a  b"))
        assert result.value == "a  b"


class TestExecuteOps:
    def test_batch(self):
        session = _session()
        results = execute_ops(
            ["flag -v", "named --out unquote:yes", "reparse", "positional 1"],
            session,
        )
        assert results == [
            "+ Flag '-v' present",
            "+ --out = my file.txt",
            "* Reparsed into 3 token(s)",
            "+ [1] input",
        ]
        assert session.line.remaining == "app.exe "

    def test_quoted_flag_matches_quoted_argument(self):
        session = _session('app "--no cache" x')
        results = execute_ops(['flag "--no cache"'], session)
        assert results == ['+ Flag \'"--no cache"\' present']
        assert session.line.remaining == "app x"

    def test_quoted_named_pattern(self):
        session = _session('app "--out file" o.txt')
        results = execute_ops(['named "--out file"'], session)
        assert results == ['+ "--out file" = o.txt']

    def test_unknown_param_in_batch(self):
        session = _session("a b")
        results = execute_ops(["reparse bogus:1"], session)
        assert results[0].startswith("! reparse: unknown param(s) bogus")

    def test_failures_do_not_stop_batch(self):
        session = _session("a b")
        results = execute_ops(["", "flag -x", "positional 0"], session)
        assert results[0] == "! Empty op string"
        assert results[1].startswith("!")
        assert results[2] == "+ [0] a"

    def test_undo_after_batch(self):
        session = _session("a b c")
        execute_ops(["positional 0", "positional 1"], session)
        session.dispatch("undo")
        assert session.line.remaining == "b c"


class TestRunQuery:
    def test_no_line(self):
        assert run_query("tokens", LineSession()).startswith("!")

    def test_remaining(self):
        assert run_query("remaining", _session("a  b")) == "a  b"

    def test_arguments(self):
        assert run_query("arguments", _session('a "b c"')) == 'a\n"b c"'

    def test_tokens(self):
        assert run_query("TOKENS", _session("a b")) == "[0] 'a'\n[1] ' '\n[2] 'b'"

    def test_unknown(self):
        assert run_query("bogus", _session()).startswith("! Unknown query")


class TestReferenceCard:
    def test_contains_all_verbs(self):
        card = reference_card()
        for syntax in ("positional INDEX", "flag PATTERN", "named PATTERN", "reparse"):
            assert syntax in card
