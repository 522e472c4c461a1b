from paren.types.environment import Environment
from paren.types.operator import Operator
from paren.types.value import Value, Int, Float, Boolean, String, NoneValue, NONE
from paren.types.node import (
    AstNode,
    RootNode,
    OperatorNode,
    LiteralNode,
    IdentifierNode,
    QuoteNode,
)
