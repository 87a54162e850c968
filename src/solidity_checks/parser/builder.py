import re
from typing import Optional, Union

from antlr4.ParserRuleContext import ParserRuleContext
from antlr4.Token import CommonToken, Token
from antlr4.tree.Tree import TerminalNode

from ..errors import VocabularyError
from ..vocabulary import Vocabulary, default_vocabulary
from .contexts import CONTEXT_CLASSES, NodeKind, SolidityContext

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
NUMBER_PATTERN = re.compile(r"^(0x[0-9A-Fa-f]+|[0-9][0-9_]*(\.[0-9]+)?([eE][0-9]+)?)$")

Child = Union[ParserRuleContext, TerminalNode, str]


class TreeBuilder:
    """
    Builds Solidity parse trees by hand, for fixtures and for hosts that have no
    generated parser. Token types come from the vocabulary, never from constants.

    Strings become terminals: a string that is a literal of the grammar (`"if"`,
    `"?"`) gets that literal's type, otherwise identifiers, numbers and quoted
    strings get the `Identifier`, `DecimalNumber`/`HexNumber` and
    `StringLiteralFragment` types.
    """

    def __init__(self, vocabulary: Optional[Vocabulary] = None) -> None:
        self.vocabulary = vocabulary or default_vocabulary()

    def _token_type(self, text: str) -> int:
        token_type = self.vocabulary.token_type(f"'{text}'")
        if token_type != Token.INVALID_TYPE:
            return token_type

        if IDENTIFIER_PATTERN.match(text):
            symbol = "Identifier"
        elif NUMBER_PATTERN.match(text):
            symbol = "HexNumber" if text.startswith("0x") else "DecimalNumber"
        elif len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
            symbol = "StringLiteralFragment"
        else:
            raise VocabularyError(f"no token type for {text!r}")
        return self.symbol_type(symbol)

    def symbol_type(self, symbol: str) -> int:
        token_type = self.vocabulary.symbolic_token_type(symbol)
        if token_type == Token.INVALID_TYPE:
            raise VocabularyError(f"symbol {symbol} is not in the vocabulary")
        return token_type

    def token(self, text: str, symbol: Optional[str] = None) -> CommonToken:
        token = CommonToken(type=self.symbol_type(symbol) if symbol else self._token_type(text))
        token.text = text
        return token

    def terminal(self, parent: ParserRuleContext, text: str, symbol: Optional[str] = None) -> TerminalNode:
        return parent.addTokenNode(self.token(text, symbol))

    def node(self, kind: NodeKind, *children: Child) -> SolidityContext:
        """
        Create a rule context of `kind` owning `children`, in order.

        Parameters
        ----------
        kind : NodeKind - The grammar rule of the node.
        children : Child - Rule contexts, terminal nodes or token texts.

        Returns
        -------
        SolidityContext - The new node; each child's parent points to it.
        """
        try:
            ctx = CONTEXT_CLASSES[kind]()
        except KeyError:
            raise ValueError(f"{kind} is not a rule of the grammar") from None

        for child in children:
            if isinstance(child, str):
                self.terminal(ctx, child)
            else:
                child.parentCtx = ctx
                ctx.addChild(child)
        return ctx

    def identifier(self, name: str) -> SolidityContext:
        return self.node(NodeKind.IDENTIFIER, name)

    def expression(self, *children: Child) -> SolidityContext:
        return self.node(NodeKind.EXPRESSION, *children)

    def statement(self, *children: Child) -> SolidityContext:
        return self.node(NodeKind.STATEMENT, *children)

    def block(self, *statements: Child) -> SolidityContext:
        return self.node(NodeKind.BLOCK, "{", *statements, "}")
