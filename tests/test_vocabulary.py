"""
Tests for token vocabulary resolution.
"""

import pytest
from antlr4.Token import Token

from solidity_checks import (
    NodeKind,
    Vocabulary,
    VocabularyError,
    default_vocabulary,
    find_terminal,
    resolve_token_type,
)
from solidity_checks import config


TOKENS = """
T__0=1
T__1=2
Identifier=3
ElseKeyword=4

'if'=1
'('=2
'else'=4
'='=5
"""


class TestDefaultVocabulary:
    """The bundled Solidity vocabulary."""

    def test_every_literal_round_trips(self):
        """The vocabulary's name for the resolved id is the input literal."""
        vocabulary = default_vocabulary()
        literals = vocabulary.literal_names()
        assert "'else'" in literals
        for literal in literals:
            token_type = resolve_token_type(literal)
            assert token_type != Token.INVALID_TYPE
            assert vocabulary.get_literal_name(token_type) == literal

    def test_resolution_is_deterministic(self):
        assert resolve_token_type("'?'") == resolve_token_type("'?'")

    def test_unknown_literal_is_sentinel(self):
        assert resolve_token_type("'elsif'") == 0
        assert resolve_token_type("") == 0

    def test_quoting_convention_is_part_of_the_literal(self):
        """Literal names carry their quotes; the bare keyword is not a literal."""
        assert resolve_token_type("'else'") != 0
        assert resolve_token_type("else") == 0

    def test_scan_agrees_with_index(self):
        vocabulary = default_vocabulary()
        for literal in vocabulary.literal_names() + ["'nope'", "Identifier"]:
            assert vocabulary.scan_token_type(literal) == vocabulary.token_type(literal)

    def test_symbolic_names(self):
        vocabulary = default_vocabulary()
        payable = vocabulary.symbolic_token_type("PayableKeyword")
        assert payable == resolve_token_type("'payable'")
        assert vocabulary.get_symbolic_name(payable) == "PayableKeyword"
        assert vocabulary.symbolic_token_type("NoSuchToken") == 0


class TestTokensFile:
    """Parsing ANTLR `.tokens` content."""

    def test_literal_and_symbolic_names(self):
        vocabulary = Vocabulary.from_tokens(TOKENS)
        assert vocabulary.max_token_type == 5
        assert vocabulary.token_type("'if'") == 1
        assert vocabulary.token_type("'='") == 5
        assert vocabulary.get_symbolic_name(4) == "ElseKeyword"
        assert vocabulary.get_literal_name(3) is None
        assert vocabulary.get_display_name(3) == "Identifier"
        assert vocabulary.get_display_name(4) == "'else'"
        assert vocabulary.get_display_name(42) == "42"

    def test_highest_token_type_is_resolvable(self):
        """The scan includes the maximum token type."""
        vocabulary = Vocabulary.from_tokens("'a'=1\n'b'=2\n")
        assert vocabulary.scan_token_type("'b'") == 2
        assert vocabulary.token_type("'b'") == 2

    def test_first_id_wins_for_duplicate_literals(self):
        vocabulary = Vocabulary.from_tokens("'x'=3\n'x'=5\n")
        assert vocabulary.token_type("'x'") == 3
        assert vocabulary.scan_token_type("'x'") == 3

    def test_operator_literals_containing_equals(self):
        vocabulary = Vocabulary.from_tokens("'=='=1\n'=>'=2\n':='=3\n'<<='=4\n'='=5\n")
        assert vocabulary.token_type("'=='") == 1
        assert vocabulary.token_type("'=>'") == 2
        assert vocabulary.token_type("':='") == 3
        assert vocabulary.token_type("'<<='") == 4
        assert vocabulary.token_type("'='") == 5
        assert vocabulary.literal_names() == ["'=='", "'=>'", "':='", "'<<='", "'='"]

    @pytest.mark.parametrize("line", ["garbage", "'x'=abc", "'x'=0", "=4"])
    def test_malformed_line(self, line):
        with pytest.raises(VocabularyError) as excinfo:
            Vocabulary.from_tokens("'ok'=1\n" + line)
        assert excinfo.value.line == 2

    def test_from_file(self, tmp_path):
        path = tmp_path / "Tiny.tokens"
        path.write_text(TOKENS, encoding="utf-8")
        vocabulary = Vocabulary.from_tokens_file(str(path))
        assert vocabulary.token_type("'else'") == 4


class TestRecognizerVocabulary:
    """Vocabularies taken from a generated parser."""

    def test_from_generated_parser_class(self):
        class SolidityParser:
            literalNames = ["<INVALID>", "'if'", "'else'"]
            symbolicNames = ["<INVALID>", "", "ElseKeyword", "Identifier"]

        vocabulary = Vocabulary.from_recognizer(SolidityParser)
        assert vocabulary.max_token_type == 3
        assert vocabulary.token_type("'else'") == 2
        assert vocabulary.token_type("<INVALID>") == 0
        assert vocabulary.get_symbolic_name(1) is None
        assert vocabulary.symbolic_token_type("Identifier") == 3


class TestFindTerminal:
    """Locating terminal children by literal."""

    def test_finds_first_matching_child(self, builder):
        node = builder.node(NodeKind.BLOCK, "{", "}")
        brace = find_terminal(node, "'{'")
        assert brace is node.getChild(0)

    def test_absent_terminal(self, builder):
        node = builder.node(NodeKind.BLOCK, "{", "}")
        assert find_terminal(node, "'else'") is None

    def test_unknown_literal_matches_nothing(self, builder):
        node = builder.node(NodeKind.BLOCK, "{", "}")
        assert find_terminal(node, "'{{'") is None

    def test_terminal_has_no_children(self, builder):
        node = builder.node(NodeKind.BLOCK, "{", "}")
        assert find_terminal(node.getChild(0), "'{'") is None

    def test_custom_vocabulary(self, builder):
        vocabulary = Vocabulary.from_tokens("'{'=99\n")
        node = builder.node(NodeKind.BLOCK, "{", "}")
        assert find_terminal(node, "'{'", vocabulary) is None


class TestConfiguredTokensFile:
    """Overriding the bundled vocabulary through the environment."""

    @pytest.fixture
    def reset_vocabulary(self):
        default_vocabulary.cache_clear()
        yield
        default_vocabulary.cache_clear()

    def test_default_path(self, monkeypatch, reset_vocabulary):
        monkeypatch.delenv(config.TOKENS_FILE_ENV, raising=False)
        assert config.tokens_file_path() == config.BUNDLED_TOKENS_FILE

    def test_env_override(self, monkeypatch, tmp_path, reset_vocabulary):
        path = tmp_path / "Other.tokens"
        path.write_text("'else'=7\n", encoding="utf-8")
        monkeypatch.setenv(config.TOKENS_FILE_ENV, str(path))
        assert config.tokens_file_path() == str(path)
        assert resolve_token_type("'else'") == 7
        assert resolve_token_type("'if'") == 0
