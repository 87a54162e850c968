from typing import Any, Dict, Optional

import simplejson
from antlr4.tree.Tree import ParseTree, TerminalNode

from .parser.contexts import NodeKind, node_kind
from .utils import string_from_pascal_to_camel_case, strip_suffix
from .vocabulary import Vocabulary, default_vocabulary


def _rule_name(tree: ParseTree) -> str:
    kind = node_kind(tree)
    if kind.rule_name is not None:
        return kind.rule_name
    return string_from_pascal_to_camel_case(strip_suffix(type(tree).__name__, "Context"))


def tree_to_dict(tree: ParseTree, vocabulary: Optional[Vocabulary] = None) -> Dict[str, Any]:
    """
    Plain-dict view of a parse tree.

    Rule nodes become `{"type": <ruleName>, "children": [...]}`, terminals
    `{"type": <token name>, "text": <text>}` where the token name is the lexer
    rule name (`Identifier`) or the quoted literal (`'if'`) for implicit tokens.
    """
    vocabulary = vocabulary or default_vocabulary()
    if isinstance(tree, TerminalNode):
        token_type = tree.getSymbol().type
        name = vocabulary.get_symbolic_name(token_type)
        # implicit tokens of the grammar are named T__<n>
        if name is None or name.startswith("T__"):
            name = vocabulary.get_display_name(token_type)
        node = {"type": name, "text": tree.getText()}
        if node_kind(tree) is NodeKind.ERROR:
            node["error"] = True
        return node

    return {
        "type": _rule_name(tree),
        "children": [tree_to_dict(child, vocabulary) for child in tree.getChildren()],
    }


def dumps_tree(tree: ParseTree, vocabulary: Optional[Vocabulary] = None, indent: Optional[int] = None) -> str:
    return simplejson.dumps(tree_to_dict(tree, vocabulary), indent=indent)
