import logging
from enum import Enum
from typing import List, Optional

from antlr4.ParserRuleContext import ParserRuleContext
from antlr4.tree.Tree import ParseTree, TerminalNode

from .errors import MissingContractError, PreconditionViolation
from .parser.contexts import NodeKind, node_kind
from .vocabulary import Vocabulary, find_terminal

logger = logging.getLogger(__name__)

COMPARING_OPERATORS = frozenset(["==", "!=", "<", ">", "<=", ">="])


class ElseClause(Enum):
    NONE = "none"
    ELSE = "else"
    ELSE_IF = "else-if"


def tree_matches(tree: Optional[ParseTree], kind: NodeKind) -> bool:
    return tree is not None and node_kind(tree) is kind


def first_child(node: Optional[ParseTree], kind: NodeKind) -> Optional[ParseTree]:
    if not isinstance(node, ParserRuleContext):
        return None
    for child in node.getChildren():
        if node_kind(child) is kind:
            return child
    return None


def children_of_kind(node: Optional[ParseTree], kind: NodeKind) -> List[ParseTree]:
    if not isinstance(node, ParserRuleContext):
        return []
    return [child for child in node.getChildren() if node_kind(child) is kind]


def _require(condition: bool, message: str) -> None:
    if not condition:
        logger.debug("Precondition failed: %s", message)
        raise PreconditionViolation(message)


def is_parenthesized(tree: ParseTree) -> bool:
    """
    Whether an expression is wrapped in parentheses, judged on its text only.
    """
    if not tree_matches(tree, NodeKind.EXPRESSION):
        return False
    expression = tree.getText()
    return expression.startswith("(") and expression.endswith(")")


def unwrap_parenthesis(tree: ParseTree) -> ParseTree:
    """
    The inner expression of a parenthesized expression `( inner )`.

    Raises
    ------
    PreconditionViolation - If `tree` is not an expression of exactly the shape `(`, inner, `)`.
    """
    _require(is_parenthesized(tree), f"'{tree.getText()}' is not a parenthesized expression")
    _require(
        tree.getChildCount() == 3
        and tree.getChild(0).getText() == "("
        and tree.getChild(2).getText() == ")",
        f"'{tree.getText()}' does not have the shape ( expression )",
    )
    return tree.getChild(1)


def is_comparison_expression(tree: ParseTree) -> bool:
    if not tree_matches(tree, NodeKind.EXPRESSION) or tree.getChildCount() < 2:
        return False
    return tree.getChild(1).getText() in COMPARING_OPERATORS


def enclosing_contract(tree: ParseTree) -> Optional[ParseTree]:
    parent = tree.parentCtx
    while parent is not None:
        if tree_matches(parent, NodeKind.CONTRACT_DEFINITION):
            return parent
        parent = parent.parentCtx
    return None


def find_enclosing_contract(tree: ParseTree) -> ParseTree:
    """
    The nearest contract definition above `tree`.

    Raises
    ------
    MissingContractError - If the walk reaches the root without meeting a contract definition.
    """
    contract = enclosing_contract(tree)
    if contract is None:
        logger.debug("No contract definition above '%s'", tree.getText())
        raise MissingContractError(tree.getText())
    return contract


def else_branch(if_statement: ParseTree, vocabulary: Optional[Vocabulary] = None) -> Optional[ParseTree]:
    """
    The statement following the `else` keyword of an if statement, if any.
    """
    else_node = find_terminal(if_statement, "'else'", vocabulary)
    if else_node is None:
        return None
    seen_else = False
    for child in if_statement.getChildren():
        if child is else_node:
            seen_else = True
        elif seen_else and not isinstance(child, TerminalNode):
            return child
    return None


def classify_else_clause(
    if_statement: ParseTree, vocabulary: Optional[Vocabulary] = None
) -> Optional[ParseTree]:
    """
    The else branch of an if statement when it is a bare `else`.

    `else if` chains are nested if statements in the else slot and yield None, as do
    if statements without else and empty else branches.
    """
    _require(
        tree_matches(if_statement, NodeKind.IF_STATEMENT),
        f"'{if_statement.getText()}' is not an if statement",
    )
    branch = else_branch(if_statement, vocabulary)
    if branch is None or branch.getChildCount() == 0:
        return None
    # exclude else - if cases
    if tree_matches(branch.getChild(0), NodeKind.IF_STATEMENT):
        return None
    return branch


def else_clause_kind(if_statement: ParseTree, vocabulary: Optional[Vocabulary] = None) -> ElseClause:
    _require(
        tree_matches(if_statement, NodeKind.IF_STATEMENT),
        f"'{if_statement.getText()}' is not an if statement",
    )
    branch = else_branch(if_statement, vocabulary)
    if branch is None:
        return ElseClause.NONE
    if branch.getChildCount() > 0 and tree_matches(branch.getChild(0), NodeKind.IF_STATEMENT):
        return ElseClause.ELSE_IF
    return ElseClause.ELSE


def is_else_if_statement(if_statement: ParseTree, vocabulary: Optional[Vocabulary] = None) -> bool:
    """
    Whether an if statement is the `if` of an `else if`, i.e. it sits in the else
    slot of an enclosing if statement.
    """
    parent = if_statement.parentCtx
    if not tree_matches(parent, NodeKind.STATEMENT):
        return False
    outer = parent.parentCtx
    return tree_matches(outer, NodeKind.IF_STATEMENT) and else_branch(outer, vocabulary) is parent


def is_ternary_expression(statement: ParseTree, vocabulary: Optional[Vocabulary] = None) -> bool:
    """
    Whether a statement is `return c ? a : b;` or `T x = c ? a : b;`.
    """
    if not tree_matches(statement, NodeKind.STATEMENT) or statement.getChildCount() == 0:
        return False

    inner = statement.getChild(0)
    kind = node_kind(inner)
    if kind is NodeKind.RETURN_STATEMENT:
        expression = first_child(inner, NodeKind.EXPRESSION)
    elif kind is NodeKind.SIMPLE_STATEMENT:
        declaration = first_child(inner, NodeKind.VARIABLE_DECLARATION_STATEMENT)
        expression = first_child(declaration, NodeKind.EXPRESSION)
    else:
        return False

    return expression is not None and find_terminal(expression, "'?'", vocabulary) is not None


def find_open_curly_brace(tree: ParseTree, vocabulary: Optional[Vocabulary] = None) -> Optional[TerminalNode]:
    return find_terminal(tree, "'{'", vocabulary)
