"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from solidity_checks import NodeKind, TreeBuilder


# =============================================================================
# TREE FIXTURES
# =============================================================================

@pytest.fixture
def builder():
    """Tree builder over the bundled Solidity vocabulary."""
    return TreeBuilder()


@pytest.fixture
def contract(builder):
    """Wrap contract parts in `contract C { ... }`, return the contract definition."""
    def wrap(*parts):
        return builder.node(
            NodeKind.CONTRACT_DEFINITION,
            "contract",
            builder.identifier("C"),
            "{",
            *[builder.node(NodeKind.CONTRACT_PART, part) for part in parts],
            "}",
        )
    return wrap


@pytest.fixture
def if_statement(builder):
    """Build `if (<condition>) {}` with an optional else branch, return the if statement."""
    def make(condition="c", else_part=None):
        children = [
            "if",
            "(",
            builder.expression(builder.identifier(condition)),
            ")",
            builder.statement(builder.block()),
        ]
        if else_part is not None:
            children += ["else", builder.statement(else_part)]
        return builder.node(NodeKind.IF_STATEMENT, *children)
    return make


@pytest.fixture
def function(builder):
    """Build `function <name>() <modifiers> <mutabilities> {}`, return the function definition."""
    def make(name="f", modifiers=(), mutabilities=(), with_modifier_list=True):
        children = ["function"]
        if name is not None:
            children.append(builder.identifier(name))
        children.append(builder.node(NodeKind.PARAMETER_LIST, "(", ")"))
        if with_modifier_list:
            children.append(
                builder.node(
                    NodeKind.MODIFIER_LIST,
                    *modifiers,
                    *[builder.node(NodeKind.STATE_MUTABILITY, m) for m in mutabilities],
                )
            )
        children.append(builder.block())
        return builder.node(NodeKind.FUNCTION_DEFINITION, *children)
    return make


@pytest.fixture
def mutabilities(builder):
    """Build a list of state mutability entries from keywords."""
    def make(*keywords):
        return [builder.node(NodeKind.STATE_MUTABILITY, keyword) for keyword in keywords]
    return make


@pytest.fixture
def modifier_list(builder):
    """Build a modifier list holding the given visibility keywords."""
    def make(*keywords):
        return builder.node(NodeKind.MODIFIER_LIST, *keywords)
    return make
