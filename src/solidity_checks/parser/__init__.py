from .contexts import NodeKind, SolidityContext, node_kind, CONTEXT_CLASSES, RULE_NAMES
from .builder import TreeBuilder
