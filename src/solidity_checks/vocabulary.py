import functools
import logging
from typing import Dict, List, Optional, Sequence

from antlr4.ParserRuleContext import ParserRuleContext
from antlr4.Token import Token
from antlr4.tree.Tree import ParseTree, TerminalNode

from . import config
from .errors import VocabularyError

logger = logging.getLogger(__name__)


class Vocabulary:
    """
    Read-only mapping from token type ids to the grammar's literal and symbolic names.

    Literal names keep the grammar's quoting convention (`'else'`, `'?'`), symbolic
    names are the lexer rule names (`Identifier`, `PayableKeyword`).

    Attributes:
    ----------
    max_token_type: int - The highest token type id known to the vocabulary
    """

    def __init__(
        self,
        literal_names: Sequence[Optional[str]],
        symbolic_names: Sequence[Optional[str]] = (),
    ) -> None:
        self._literal_names = tuple(literal_names)
        self._symbolic_names = tuple(symbolic_names)
        self.max_token_type: int = max(len(self._literal_names), len(self._symbolic_names)) - 1
        self._literal_index = self._invert(self._literal_names)
        self._symbolic_index = self._invert(self._symbolic_names)

    def _invert(self, names: Sequence[Optional[str]]) -> Dict[str, int]:
        # first id wins, like the reference scan
        index: Dict[str, int] = {}
        for token_type in range(1, len(names)):
            name = names[token_type]
            if name is not None:
                index.setdefault(name, token_type)
        return index

    @staticmethod
    def _name_at(names: Sequence[Optional[str]], token_type: int) -> Optional[str]:
        if 0 <= token_type < len(names):
            return names[token_type]
        return None

    def get_literal_name(self, token_type: int) -> Optional[str]:
        """
        Quoted literal name of a token type (`'else'`), None for lexical tokens and unknown ids.
        """
        return self._name_at(self._literal_names, token_type)

    def get_symbolic_name(self, token_type: int) -> Optional[str]:
        """
        Lexer rule name of a token type (`Identifier`), None if the grammar gives it none.
        """
        return self._name_at(self._symbolic_names, token_type)

    def get_display_name(self, token_type: int) -> str:
        """
        Literal name, else symbolic name, else the id itself as text.
        """
        return (
            self.get_literal_name(token_type)
            or self.get_symbolic_name(token_type)
            or str(token_type)
        )

    def literal_names(self) -> List[str]:
        """
        All literal names in token type order.
        """
        return [name for name in self._literal_names[1:] if name is not None]

    def token_type(self, literal: str) -> int:
        """
        Token type id whose literal name equals `literal`, or `Token.INVALID_TYPE` (0).
        """
        return self._literal_index.get(literal, Token.INVALID_TYPE)

    def scan_token_type(self, literal: str) -> int:
        """
        Reference lookup: scans ids 1..max_token_type and returns the first whose
        literal name equals `literal`, `Token.INVALID_TYPE` (0) if none does.
        """
        for token_type in range(1, self.max_token_type + 1):
            if literal == self.get_literal_name(token_type):
                return token_type
        return Token.INVALID_TYPE

    def symbolic_token_type(self, name: str) -> int:
        """
        Token type id of a lexer rule name, or `Token.INVALID_TYPE` (0).
        """
        return self._symbolic_index.get(name, Token.INVALID_TYPE)

    @classmethod
    def from_tokens(cls, tokens: str) -> "Vocabulary":
        """
        Build a vocabulary from the content of an ANTLR `.tokens` file.

        Parameters
        ----------
        tokens : str - Lines of the form `Name=id` or `'literal'=id`.

        Returns
        -------
        Vocabulary - The vocabulary described by the lines.

        Raises
        ------
        VocabularyError - If a non-blank line is not `name=id` with an integer id >= 1.
        """
        literals: Dict[int, str] = {}
        symbols: Dict[int, str] = {}

        for line_number, line in enumerate(tokens.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            if "=" not in line:
                raise VocabularyError(f"expected name=id, got {line!r}", line_number)
            # the id follows the last '=', literals such as '<<=' contain their own
            name, _, key = line.rpartition("=")
            try:
                token_type = int(key)
            except ValueError:
                raise VocabularyError(f"token type {key!r} is not an integer", line_number) from None
            if not name or token_type < 1:
                raise VocabularyError(f"invalid token entry {line!r}", line_number)

            if name.startswith("'"):
                literals.setdefault(token_type, name)
            else:
                symbols.setdefault(token_type, name)

        size = max(list(literals) + list(symbols) + [0]) + 1
        return cls(
            [literals.get(i) for i in range(size)],
            [symbols.get(i) for i in range(size)],
        )

    @classmethod
    def from_tokens_file(cls, path: str) -> "Vocabulary":
        with open(path, "r", encoding="utf-8") as f:
            vocabulary = cls.from_tokens(f.read())
        logger.info("Loaded vocabulary of %d token types from %s", vocabulary.max_token_type, path)
        return vocabulary

    @classmethod
    def from_recognizer(cls, recognizer) -> "Vocabulary":
        """
        Build a vocabulary from an ANTLR-generated parser or lexer (class or instance).

        Generated recognizers expose `literalNames` and `symbolicNames`, with
        `"<INVALID>"` at index 0.
        """
        literal_names = [
            None if name in ("<INVALID>", "") else name
            for name in getattr(recognizer, "literalNames", [])
        ]
        symbolic_names = [
            None if name in ("<INVALID>", "") else name
            for name in getattr(recognizer, "symbolicNames", [])
        ]
        return cls(literal_names, symbolic_names)


@functools.lru_cache(maxsize=None)
def default_vocabulary() -> Vocabulary:
    return Vocabulary.from_tokens_file(config.tokens_file_path())


def resolve_token_type(literal: str, vocabulary: Optional[Vocabulary] = None) -> int:
    """
    Resolve a grammar literal symbol such as `"'else'"` to its token type id.

    Returns `Token.INVALID_TYPE` (0) when the literal is not in the vocabulary; 0
    matches no real token.
    """
    vocabulary = vocabulary or default_vocabulary()
    token_type = vocabulary.token_type(literal)
    if token_type == Token.INVALID_TYPE:
        logger.debug("Literal %s is not in the vocabulary", literal)
    return token_type


def find_terminal(
    node: ParseTree, literal: str, vocabulary: Optional[Vocabulary] = None
) -> Optional[TerminalNode]:
    """
    First direct child of `node` that is a terminal of the type `literal` resolves to.
    """
    if not isinstance(node, ParserRuleContext):
        return None
    token_type = resolve_token_type(literal, vocabulary)
    if token_type == Token.INVALID_TYPE:
        return None
    return node.getToken(token_type, 0)
