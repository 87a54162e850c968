"""
Rule contexts of the Solidity grammar that the checks navigate.

The classes mirror the `*Context` classes an ANTLR-generated Solidity parser
produces, so trees coming from such a parser and trees built with
`solidity_checks.parser.builder` classify the same way through `node_kind`.
"""
import functools
from enum import Enum
from typing import Dict, List, Optional

from antlr4.ParserRuleContext import ParserRuleContext
from antlr4.tree.Tree import ErrorNode, ParseTree, TerminalNode
from typing_extensions import override

from ..utils import string_from_pascal_to_camel_case, strip_suffix


class NodeKind(Enum):
    SOURCE_UNIT = "SourceUnit"
    PRAGMA_DIRECTIVE = "PragmaDirective"
    CONTRACT_DEFINITION = "ContractDefinition"
    CONTRACT_PART = "ContractPart"
    STATE_VARIABLE_DECLARATION = "StateVariableDeclaration"
    FUNCTION_DEFINITION = "FunctionDefinition"
    MODIFIER_LIST = "ModifierList"
    MODIFIER_INVOCATION = "ModifierInvocation"
    STATE_MUTABILITY = "StateMutability"
    PARAMETER_LIST = "ParameterList"
    PARAMETER = "Parameter"
    RETURN_PARAMETERS = "ReturnParameters"
    BLOCK = "Block"
    STATEMENT = "Statement"
    IF_STATEMENT = "IfStatement"
    WHILE_STATEMENT = "WhileStatement"
    FOR_STATEMENT = "ForStatement"
    RETURN_STATEMENT = "ReturnStatement"
    SIMPLE_STATEMENT = "SimpleStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    VARIABLE_DECLARATION_STATEMENT = "VariableDeclarationStatement"
    VARIABLE_DECLARATION = "VariableDeclaration"
    TYPE_NAME = "TypeName"
    ELEMENTARY_TYPE_NAME = "ElementaryTypeName"
    EXPRESSION = "Expression"
    PRIMARY_EXPRESSION = "PrimaryExpression"
    FUNCTION_CALL = "FunctionCall"
    FUNCTION_CALL_ARGUMENTS = "FunctionCallArguments"
    IDENTIFIER = "Identifier"
    TERMINAL = "<terminal>"
    ERROR = "<error>"
    OTHER = "<other>"

    @property
    def rule_name(self) -> Optional[str]:
        if self in (NodeKind.TERMINAL, NodeKind.ERROR, NodeKind.OTHER):
            return None
        return string_from_pascal_to_camel_case(self.value)


_KINDS_BY_NAME: Dict[str, NodeKind] = {kind.value: kind for kind in NodeKind}

RULE_NAMES: List[str] = [kind.rule_name for kind in NodeKind if kind.rule_name is not None]
_RULE_INDEX: Dict[str, int] = {name: index for index, name in enumerate(RULE_NAMES)}


class SolidityContext(ParserRuleContext):
    """
    Base of the rule contexts. `kind` is fixed per class.
    """

    kind: NodeKind = NodeKind.OTHER

    def __init__(self, parent: Optional[ParserRuleContext] = None, invokingState: int = -1):
        super().__init__(parent, invokingState)

    @override
    def getRuleIndex(self) -> int:
        return _RULE_INDEX.get(self.kind.rule_name, -1)

    def getRuleName(self) -> str:
        return self.kind.rule_name


class SourceUnitContext(SolidityContext):
    kind = NodeKind.SOURCE_UNIT


class PragmaDirectiveContext(SolidityContext):
    kind = NodeKind.PRAGMA_DIRECTIVE


class ContractDefinitionContext(SolidityContext):
    kind = NodeKind.CONTRACT_DEFINITION


class ContractPartContext(SolidityContext):
    kind = NodeKind.CONTRACT_PART


class StateVariableDeclarationContext(SolidityContext):
    kind = NodeKind.STATE_VARIABLE_DECLARATION


class FunctionDefinitionContext(SolidityContext):
    kind = NodeKind.FUNCTION_DEFINITION


class ModifierListContext(SolidityContext):
    kind = NodeKind.MODIFIER_LIST


class ModifierInvocationContext(SolidityContext):
    kind = NodeKind.MODIFIER_INVOCATION


class StateMutabilityContext(SolidityContext):
    kind = NodeKind.STATE_MUTABILITY


class ParameterListContext(SolidityContext):
    kind = NodeKind.PARAMETER_LIST


class ParameterContext(SolidityContext):
    kind = NodeKind.PARAMETER


class ReturnParametersContext(SolidityContext):
    kind = NodeKind.RETURN_PARAMETERS


class BlockContext(SolidityContext):
    kind = NodeKind.BLOCK


class StatementContext(SolidityContext):
    kind = NodeKind.STATEMENT


class IfStatementContext(SolidityContext):
    kind = NodeKind.IF_STATEMENT


class WhileStatementContext(SolidityContext):
    kind = NodeKind.WHILE_STATEMENT


class ForStatementContext(SolidityContext):
    kind = NodeKind.FOR_STATEMENT


class ReturnStatementContext(SolidityContext):
    kind = NodeKind.RETURN_STATEMENT


class SimpleStatementContext(SolidityContext):
    kind = NodeKind.SIMPLE_STATEMENT


class ExpressionStatementContext(SolidityContext):
    kind = NodeKind.EXPRESSION_STATEMENT


class VariableDeclarationStatementContext(SolidityContext):
    kind = NodeKind.VARIABLE_DECLARATION_STATEMENT


class VariableDeclarationContext(SolidityContext):
    kind = NodeKind.VARIABLE_DECLARATION


class TypeNameContext(SolidityContext):
    kind = NodeKind.TYPE_NAME


class ElementaryTypeNameContext(SolidityContext):
    kind = NodeKind.ELEMENTARY_TYPE_NAME


class ExpressionContext(SolidityContext):
    kind = NodeKind.EXPRESSION


class PrimaryExpressionContext(SolidityContext):
    kind = NodeKind.PRIMARY_EXPRESSION


class FunctionCallContext(SolidityContext):
    kind = NodeKind.FUNCTION_CALL


class FunctionCallArgumentsContext(SolidityContext):
    kind = NodeKind.FUNCTION_CALL_ARGUMENTS


class IdentifierContext(SolidityContext):
    kind = NodeKind.IDENTIFIER


CONTEXT_CLASSES: Dict[NodeKind, type] = {
    cls.kind: cls for cls in SolidityContext.__subclasses__()
}


@functools.lru_cache(maxsize=None)
def _kind_of_class(cls: type) -> NodeKind:
    kind = getattr(cls, "kind", None)
    if isinstance(kind, NodeKind):
        return kind
    return _KINDS_BY_NAME.get(strip_suffix(cls.__name__, "Context"), NodeKind.OTHER)


def node_kind(tree: ParseTree) -> NodeKind:
    """
    Kind of a parse tree node.

    Rule contexts are classified once per class, either from their `kind`
    attribute or from the class name (`IfStatementContext` -> IF_STATEMENT).
    """
    if isinstance(tree, ErrorNode):
        return NodeKind.ERROR
    if isinstance(tree, TerminalNode):
        return NodeKind.TERMINAL
    if tree is None:
        return NodeKind.OTHER
    return _kind_of_class(type(tree))
