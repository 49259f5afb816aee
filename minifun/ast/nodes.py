from abc import ABC
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ASTNode(ABC):
    pass


# Literals
@dataclass(frozen=True)
class IntLiteral(ASTNode):
    value: int


@dataclass(frozen=True)
class BoolLiteral(ASTNode):
    value: bool


# Variables and Identifiers
@dataclass(frozen=True)
class Variable(ASTNode):
    name: str


# Control Flow
@dataclass(frozen=True)
class IfElse(ASTNode):
    condition: "Expression"
    then_expr: "Expression"
    else_expr: "Expression"


# Functions
@dataclass(frozen=True)
class FunctionLiteral(ASTNode):
    param: str
    body: "Expression"


@dataclass(frozen=True)
class FunctionApplication(ASTNode):
    function: "Expression"
    argument: "Expression"


Expression = Union[
    IntLiteral,
    BoolLiteral,
    Variable,
    IfElse,
    FunctionLiteral,
    FunctionApplication,
]
