import logging

from .errors import (
    SolidityChecksError,
    VocabularyError,
    PreconditionViolation,
    MissingContractError,
    FixtureMismatchError,
)
from .vocabulary import Vocabulary, default_vocabulary, resolve_token_type, find_terminal
from .parser import NodeKind, TreeBuilder, node_kind
from .tree_utils import (
    COMPARING_OPERATORS,
    ElseClause,
    tree_matches,
    first_child,
    children_of_kind,
    is_parenthesized,
    unwrap_parenthesis,
    is_comparison_expression,
    enclosing_contract,
    find_enclosing_contract,
    else_branch,
    classify_else_clause,
    else_clause_kind,
    is_else_if_statement,
    is_ternary_expression,
    find_open_curly_brace,
)
from .function_utils import (
    Visibility,
    StateMutability,
    FunctionSummary,
    extract_function_name,
    state_mutability_of,
    is_payable,
    is_view_or_pure,
    visibility_of,
    has_no_explicit_visibility,
    is_public_or_external,
    is_callback_function,
    modifier_list_of,
    state_mutabilities_of,
    describe_function,
)
from .fixtures import (
    ExpectedIssue,
    is_expectation_comment,
    extract_expectation_message,
    collect_expected_issues,
    verify_issues,
)
from .serialize import tree_to_dict, dumps_tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
