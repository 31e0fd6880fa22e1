"""Tests for argline.formatter."""

from argline.formatter import format_result, format_tokens, suggest, unknown_message


class TestFormatResult:
    def test_success(self):
        assert format_result(True, "Flag '-v' present") == "+ Flag '-v' present"

    def test_failure(self):
        assert format_result(False, "No argument at position 3") == "! No argument at position 3"

    def test_custom_prefix(self):
        assert format_result(True, "Reparsed", prefix="*") == "* Reparsed"

    def test_custom_prefix_on_failure(self):
        assert format_result(False, "Error", prefix="~") == "~ Error"

    def test_empty_message(self):
        assert format_result(True, "") == "+ "


class TestFormatTokens:
    def test_listing(self):
        assert format_tokens(["a", " ", "b"]) == "[0] 'a'\n[1] ' '\n[2] 'b'"

    def test_cleared_slots(self):
        assert format_tokens(["", "b"]) == "[0] <cleared>\n[1] 'b'"

    def test_index_width(self):
        lines = format_tokens(["x"] * 11).splitlines()
        assert lines[0] == "[ 0] 'x'"
        assert lines[10] == "[10] 'x'"

    def test_empty(self):
        assert format_tokens([]) == "(no tokens)"


class TestSuggest:
    def test_exact_match(self):
        assert suggest("flag", ["positional", "flag", "named"]) == "flag"

    def test_typo_correction(self):
        assert suggest("nmaed", ["positional", "flag", "named"]) == "named"

    def test_no_match(self):
        assert suggest("xyz", ["positional", "flag", "named"]) is None

    def test_empty_candidates(self):
        assert suggest("flag", []) is None

    def test_case_insensitive_returns_candidate_spelling(self):
        assert suggest("LAOD", ["load", "show"]) == "load"


class TestUnknownMessage:
    def test_with_hint(self):
        message = unknown_message("verb", "flg", ["positional", "flag", "named"])
        assert message == "Unknown verb 'flg' (did you mean 'flag'?)"

    def test_without_hint(self):
        assert unknown_message("query", "xyz", ["tokens"]) == "Unknown query 'xyz'"
