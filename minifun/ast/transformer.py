"""
AST Transformer for converting Lark parse trees to custom AST nodes.

This module provides a transformer that converts raw Lark Tree and Token
objects into the expression classes defined in nodes.py.
"""

from typing import Any, List

from lark import Token, Transformer, Tree

from minifun.ast.nodes import (
    BoolLiteral,
    Expression,
    FunctionApplication,
    FunctionLiteral,
    IfElse,
    IntLiteral,
    Variable,
)


class ASTTransformer(Transformer):
    """Transformer that converts Lark parse trees to custom AST nodes."""

    # Literals
    def int(self, items: List[Any]) -> IntLiteral:
        """Transform integer literal."""
        value = items[0]
        match value:
            case Token():
                return IntLiteral(int(value.value))
            case _:
                return IntLiteral(int(value))

    def true(self, items: List[Any]) -> BoolLiteral:
        """Transform true literal."""
        return BoolLiteral(True)

    def false(self, items: List[Any]) -> BoolLiteral:
        """Transform false literal."""
        return BoolLiteral(False)

    # Variables and Identifiers
    def var(self, items: List[Any]) -> Variable:
        """Transform variable reference."""
        match items[0]:
            case Token(value=value):
                return Variable(value)
            case value:
                return Variable(str(value))

    # Control Flow
    def if_else(self, items: List[Any]) -> IfElse:
        """Transform if-else expression."""
        return IfElse(items[0], items[1], items[2])

    # Functions
    def fun(self, items: List[Any]) -> FunctionLiteral:
        """Transform single-parameter function literal."""
        match items:
            case [Token(value=param), body]:
                return FunctionLiteral(param, body)
            case _:
                raise ValueError(f"Invalid function items: {items}")

    def app(self, items: List[Any]) -> FunctionApplication:
        """Transform function application."""
        return FunctionApplication(items[0], items[1])


def transform_parse_tree(tree: Tree) -> Expression:
    """
    Transform a Lark parse tree into a custom AST.
    """
    transformer = ASTTransformer()
    return transformer.transform(tree)
