"""
Unification algorithm for the constraint-based type checker
"""

import logging
from typing import List, Tuple

from minifun.typechecker.substitution import TypeSubstitution
from minifun.typechecker.types import (
    Constraint,
    FunctionType,
    Type,
    TypeVar,
    apply_constraints,
    has_tvar,
)

logger = logging.getLogger(__name__)


class UnificationError(Exception):
    pass


class TypeMismatchError(UnificationError):
    def __init__(self, left: Type, right: Type) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Cannot unify {left} and {right}")


class OccursCheckError(UnificationError):
    def __init__(self, var: TypeVar, typ: Type) -> None:
        self.var = var
        self.type = typ
        super().__init__(f"Occurs check failed: {var} occurs in {typ}")


def _bind(
    var: TypeVar,
    typ: Type,
    rest: List[Constraint],
) -> Tuple[TypeSubstitution, List[Constraint]]:
    if has_tvar(typ, var.id):
        raise OccursCheckError(var, typ)
    binding = TypeSubstitution.single(var.id, typ)
    logger.debug("bind %s := %s", var, typ)
    return binding, apply_constraints(binding, rest)


def unify(constraints: List[Constraint]) -> TypeSubstitution:
    """Solve ``constraints`` and return their most general unifier.

    Constraints are consumed front to back. Each variable binding is applied to
    the remaining constraints before continuing, and the result is the
    composition of all bindings with later bindings applied over earlier ones:
    ``compose(unify(rest'), {id -> t})`` for every step.

    Raises:
        TypeMismatchError: two constructors cannot be made equal
        OccursCheckError: a variable would need an infinite type
    """
    worklist = list(constraints)
    bindings: List[TypeSubstitution] = []

    while worklist:
        t1, t2 = worklist.pop(0)
        logger.debug("unify %s ~ %s", t1, t2)

        if t1 == t2:
            continue

        match (t1, t2):
            case (TypeVar() as var, _):
                binding, worklist = _bind(var, t2, worklist)
                bindings.append(binding)
            case (_, TypeVar() as var):
                binding, worklist = _bind(var, t1, worklist)
                bindings.append(binding)
            case (
                FunctionType(param=param1, result=result1),
                FunctionType(param=param2, result=result2),
            ):
                worklist[:0] = [(param1, param2), (result1, result2)]
            case _:
                raise TypeMismatchError(t1, t2)

    subst = TypeSubstitution()
    for binding in reversed(bindings):
        subst = subst.compose(binding)
    return subst
