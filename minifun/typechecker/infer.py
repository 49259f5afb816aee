"""
Constraint-based type inference: constraint generation followed by unification.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from minifun.ast.nodes import (
    BoolLiteral,
    Expression,
    FunctionApplication,
    FunctionLiteral,
    IfElse,
    IntLiteral,
    Variable,
)
from minifun.typechecker.substitution import TypeSubstitution
from minifun.typechecker.types import (
    BOOL_TYPE,
    INT_TYPE,
    Constraint,
    FunctionType,
    Type,
    TypeVar,
)
from minifun.typechecker.unify import UnificationError, unify

logger = logging.getLogger(__name__)

Context = Dict[str, Type]

# Built-in identifiers resolve to fixed types and never enter the context
BUILTIN_TYPES: Dict[str, Type] = {
    "true": BOOL_TYPE,
    "false": BOOL_TYPE,
    "succ": FunctionType(INT_TYPE, INT_TYPE),
    "pred": FunctionType(INT_TYPE, INT_TYPE),
    "iszero": FunctionType(INT_TYPE, BOOL_TYPE),
}


@dataclass
class InferenceState:
    """Mutable state threaded through one constraint generation run."""

    context: Context = field(default_factory=dict)
    constraints: List[Constraint] = field(default_factory=list)
    next_var: int = 0

    def fresh_type_var(self) -> TypeVar:
        """Generate a fresh type variable."""
        var = TypeVar(self.next_var)
        self.next_var += 1
        return var

    def bind(self, name: str, typ: Type) -> None:
        logger.debug("context %s : %s", name, typ)
        self.context[name] = typ

    def add_constraint(self, left: Type, right: Type) -> None:
        logger.debug("constraint %s ~ %s", left, right)
        self.constraints.append((left, right))


@dataclass
class InferenceResult:
    """Outcome of one ``infer`` call.

    ``substitution`` is None when the constraints have no solution; ``error``
    then holds the reason. Context and constraints are kept either way.
    """

    type: Type
    context: Context
    constraints: List[Constraint]
    substitution: Optional[TypeSubstitution]
    error: Optional[UnificationError] = None

    @property
    def ok(self) -> bool:
        return self.substitution is not None

    def principal_type(self) -> Optional[Type]:
        if self.substitution is None:
            return None
        return self.substitution.apply(self.type)

    def resolved_context(self) -> Optional[Context]:
        if self.substitution is None:
            return None
        return {
            name: self.substitution.apply(typ) for name, typ in self.context.items()
        }


class ConstraintGenerator:
    """Walks an expression once, collecting equality constraints."""

    def __init__(self, state: Optional[InferenceState] = None) -> None:
        self.state = state or InferenceState()

    def infer_expr(self, expr: Expression) -> Type:
        """Return the (unsolved) type of ``expr``, recording constraints."""
        match expr:
            case IntLiteral():
                return INT_TYPE
            case BoolLiteral():
                return BOOL_TYPE
            case Variable(name=name):
                return self._infer_identifier(name)
            case IfElse(condition=cond, then_expr=then_expr, else_expr=else_expr):
                return self._infer_if_else(cond, then_expr, else_expr)
            case FunctionLiteral(param=param, body=body):
                return self._infer_function(param, body)
            case FunctionApplication(function=func_expr, argument=arg_expr):
                return self._infer_function_application(func_expr, arg_expr)
            case _:
                raise TypeError(f"Unhandled expression type: {type(expr).__name__}")

    def _infer_identifier(self, name: str) -> Type:
        builtin = BUILTIN_TYPES.get(name)
        if builtin is not None:
            return builtin

        known = self.state.context.get(name)
        if known is not None:
            return known

        # First occurrence of a free variable
        var = self.state.fresh_type_var()
        self.state.bind(name, var)
        return var

    def _infer_if_else(
        self,
        cond: Expression,
        then_expr: Expression,
        else_expr: Expression,
    ) -> Type:
        cond_type = self.infer_expr(cond)
        then_type = self.infer_expr(then_expr)
        else_type = self.infer_expr(else_expr)

        self.state.add_constraint(cond_type, BOOL_TYPE)
        self.state.add_constraint(then_type, else_type)
        return else_type

    def _infer_function(self, param: str, body: Expression) -> Type:
        # The parameter overwrites any earlier binding of the same name and
        # stays bound after the body.
        param_type = self.state.fresh_type_var()
        self.state.bind(param, param_type)
        body_type = self.infer_expr(body)
        return FunctionType(param_type, body_type)

    def _infer_function_application(
        self,
        func_expr: Expression,
        arg_expr: Expression,
    ) -> Type:
        arg_type = self.infer_expr(arg_expr)
        func_type = self.infer_expr(func_expr)
        result_type = self.state.fresh_type_var()

        self.state.add_constraint(func_type, FunctionType(arg_type, result_type))
        return result_type


def infer(expr: Expression) -> InferenceResult:
    """Infer the type of ``expr``.

    Never raises for ill-typed programs: a failed unification is reported
    through ``InferenceResult.substitution`` being None.
    """
    generator = ConstraintGenerator()
    root_type = generator.infer_expr(expr)
    state = generator.state

    try:
        subst: Optional[TypeSubstitution] = unify(state.constraints)
        error = None
    except UnificationError as e:
        logger.debug("no substitution found: %s", e)
        subst = None
        error = e

    return InferenceResult(
        type=root_type,
        context=state.context,
        constraints=state.constraints,
        substitution=subst,
        error=error,
    )
