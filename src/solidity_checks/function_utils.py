import logging
from enum import Enum
from typing import Iterable, List, Optional

from antlr4.tree.Tree import ParseTree

from .errors import PreconditionViolation
from .parser.contexts import NodeKind, node_kind
from .tree_utils import children_of_kind, first_child, tree_matches
from .vocabulary import Vocabulary, find_terminal

logger = logging.getLogger(__name__)

CALLBACK_FUNCTION_NAME = "__callback"


class Visibility(Enum):
    PUBLIC = "public"
    EXTERNAL = "external"
    INTERNAL = "internal"
    PRIVATE = "private"
    DEFAULT = "default"


class StateMutability(Enum):
    PAYABLE = "payable"
    VIEW = "view"
    PURE = "pure"
    UNSPECIFIED = "unspecified"


VISIBILITY_KEYWORDS = {
    Visibility.PUBLIC: "'public'",
    Visibility.EXTERNAL: "'external'",
    Visibility.INTERNAL: "'internal'",
    Visibility.PRIVATE: "'private'",
}

MUTABILITY_KEYWORDS = {
    StateMutability.PAYABLE: "'payable'",
    StateMutability.VIEW: "'view'",
    StateMutability.PURE: "'pure'",
}


class FunctionSummary:
    """
    Semantic properties of a function definition.

    Attributes:
    ----------
    name: Optional[str] - The function name, None for fallback/receive style functions
    visibility: Visibility - The explicit visibility, DEFAULT when none is declared
    mutability: StateMutability - The declared state mutability
    is_callback: bool - Whether the function follows the `__callback` naming convention
    """

    def __init__(
        self,
        name: Optional[str],
        visibility: Visibility,
        mutability: StateMutability,
        is_callback: bool,
    ) -> None:
        self.name: Optional[str] = name
        self.visibility: Visibility = visibility
        self.mutability: StateMutability = mutability
        self.is_callback: bool = is_callback

    @property
    def is_public_or_external(self) -> bool:
        return self.visibility in (Visibility.DEFAULT, Visibility.PUBLIC, Visibility.EXTERNAL)

    def __repr__(self) -> str:
        return (
            f"FunctionSummary(name={self.name!r}, visibility={self.visibility.value}, "
            f"mutability={self.mutability.value}, is_callback={self.is_callback})"
        )


def extract_function_name(function: ParseTree) -> Optional[str]:
    """
    Name of a function definition or of the function a call invokes.

    For calls only the first identifier is used. Returns None when the node has
    no identifier (fallback and receive functions).

    Raises
    ------
    PreconditionViolation - If `function` is neither a function definition nor a function call.
    """
    kind = node_kind(function)
    if kind not in (NodeKind.FUNCTION_DEFINITION, NodeKind.FUNCTION_CALL):
        raise PreconditionViolation(f"expected a function definition or call, got {kind.value}")
    identifier = first_child(function, NodeKind.IDENTIFIER)
    if identifier is None:
        return None
    return identifier.getText()


def _has_keyword(node: ParseTree, keyword: str, vocabulary: Optional[Vocabulary]) -> bool:
    return find_terminal(node, keyword, vocabulary) is not None


def state_mutability_of(entry: ParseTree, vocabulary: Optional[Vocabulary] = None) -> StateMutability:
    for mutability, keyword in MUTABILITY_KEYWORDS.items():
        if _has_keyword(entry, keyword, vocabulary):
            return mutability
    return StateMutability.UNSPECIFIED


def is_payable(state_mutabilities: Iterable[ParseTree], vocabulary: Optional[Vocabulary] = None) -> bool:
    """
    True when exactly one entry is `payable`; duplicated entries count as not payable.
    """
    return sum(
        1 for entry in state_mutabilities if _has_keyword(entry, "'payable'", vocabulary)
    ) == 1


def is_view_or_pure(state_mutabilities: Iterable[ParseTree], vocabulary: Optional[Vocabulary] = None) -> bool:
    return sum(
        1
        for entry in state_mutabilities
        if _has_keyword(entry, "'view'", vocabulary) or _has_keyword(entry, "'pure'", vocabulary)
    ) == 1


def visibility_of(modifier_list: ParseTree, vocabulary: Optional[Vocabulary] = None) -> Visibility:
    for visibility, keyword in VISIBILITY_KEYWORDS.items():
        if _has_keyword(modifier_list, keyword, vocabulary):
            return visibility
    return Visibility.DEFAULT


def has_no_explicit_visibility(modifier_list: ParseTree, vocabulary: Optional[Vocabulary] = None) -> bool:
    return not any(
        _has_keyword(modifier_list, keyword, vocabulary) for keyword in VISIBILITY_KEYWORDS.values()
    )


def is_public_or_external(modifier_list: ParseTree, vocabulary: Optional[Vocabulary] = None) -> bool:
    return (
        has_no_explicit_visibility(modifier_list, vocabulary)
        or _has_keyword(modifier_list, "'public'", vocabulary)
        or _has_keyword(modifier_list, "'external'", vocabulary)
    )


def is_callback_function(function: ParseTree) -> bool:
    if not tree_matches(function, NodeKind.FUNCTION_DEFINITION):
        raise PreconditionViolation(f"expected a function definition, got {node_kind(function).value}")
    return extract_function_name(function) == CALLBACK_FUNCTION_NAME


def modifier_list_of(function: ParseTree) -> Optional[ParseTree]:
    return first_child(function, NodeKind.MODIFIER_LIST)


def state_mutabilities_of(modifier_list: Optional[ParseTree]) -> List[ParseTree]:
    return children_of_kind(modifier_list, NodeKind.STATE_MUTABILITY)


def describe_function(function: ParseTree, vocabulary: Optional[Vocabulary] = None) -> FunctionSummary:
    """
    Collect name, visibility, state mutability and naming convention of a function definition.

    A function without a modifier list has default visibility and unspecified
    mutability. When the mutability entries are malformed (duplicated `payable`,
    both `view` and `pure`) the mutability is UNSPECIFIED.
    """
    if not tree_matches(function, NodeKind.FUNCTION_DEFINITION):
        raise PreconditionViolation(f"expected a function definition, got {node_kind(function).value}")

    modifier_list = modifier_list_of(function)
    entries = state_mutabilities_of(modifier_list)

    if modifier_list is None:
        visibility = Visibility.DEFAULT
    else:
        visibility = visibility_of(modifier_list, vocabulary)

    mutability = StateMutability.UNSPECIFIED
    if is_payable(entries, vocabulary):
        mutability = StateMutability.PAYABLE
    elif is_view_or_pure(entries, vocabulary):
        mutability = next(
            m
            for m in (state_mutability_of(entry, vocabulary) for entry in entries)
            if m in (StateMutability.VIEW, StateMutability.PURE)
        )

    summary = FunctionSummary(
        name=extract_function_name(function),
        visibility=visibility,
        mutability=mutability,
        is_callback=is_callback_function(function),
    )
    logger.debug("Described function %r", summary)
    return summary
