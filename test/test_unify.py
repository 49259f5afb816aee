import pytest

from minifun.typechecker.substitution import TypeSubstitution
from minifun.typechecker.types import BOOL_TYPE, INT_TYPE, FunctionType, TypeVar
from minifun.typechecker.unify import (
    OccursCheckError,
    TypeMismatchError,
    UnificationError,
    unify,
)

T0, T1, T2, T3 = TypeVar(0), TypeVar(1), TypeVar(2), TypeVar(3)


def test_empty_constraints() -> None:
    assert unify([]) == TypeSubstitution()


def test_reflexive_constraints_are_dropped() -> None:
    assert unify([(INT_TYPE, INT_TYPE), (T0, T0)]) == TypeSubstitution()


@pytest.mark.parametrize(
    "constraint",
    [(T0, INT_TYPE), (INT_TYPE, T0)],
)
def test_variable_binds_either_side(constraint) -> None:
    assert unify([constraint]) == TypeSubstitution({0: INT_TYPE})


def test_function_types_decompose() -> None:
    subst = unify([(FunctionType(T0, T1), FunctionType(INT_TYPE, BOOL_TYPE))])
    assert subst == TypeSubstitution({0: INT_TYPE, 1: BOOL_TYPE})


def test_binding_rewrites_remaining_constraints() -> None:
    with pytest.raises(TypeMismatchError):
        unify([(T0, INT_TYPE), (T0, BOOL_TYPE)])


def test_chains_are_fully_resolved() -> None:
    subst = unify([(T0, T1), (T1, INT_TYPE)])
    assert subst == TypeSubstitution({0: INT_TYPE, 1: INT_TYPE})


@pytest.mark.parametrize(
    "left,right",
    [
        (INT_TYPE, BOOL_TYPE),
        (INT_TYPE, FunctionType(INT_TYPE, T0)),
        (FunctionType(T0, T1), BOOL_TYPE),
        (FunctionType(INT_TYPE, T0), FunctionType(BOOL_TYPE, T0)),
    ],
)
def test_mismatch(left, right) -> None:
    with pytest.raises(TypeMismatchError):
        unify([(left, right)])


@pytest.mark.parametrize(
    "left,right",
    [
        (T0, FunctionType(T0, INT_TYPE)),
        (FunctionType(INT_TYPE, T1), T1),
        (FunctionType(T0, T1), FunctionType(T1, FunctionType(T0, INT_TYPE))),
    ],
)
def test_occurs_check(left, right) -> None:
    with pytest.raises(OccursCheckError):
        unify([(left, right)])


def test_errors_share_a_base_class() -> None:
    assert issubclass(TypeMismatchError, UnificationError)
    assert issubclass(OccursCheckError, UnificationError)


CONSTRAINT_SETS = [
    [(T0, FunctionType(T1, T2)), (FunctionType(T1, T2), FunctionType(T2, T3))],
    [(FunctionType(T0, T0), FunctionType(T1, INT_TYPE)), (T2, T1)],
    [(T3, FunctionType(T0, T1)), (T0, BOOL_TYPE), (T1, T0)],
]


@pytest.mark.parametrize("constraints", CONSTRAINT_SETS)
def test_solution_satisfies_every_constraint(constraints) -> None:
    subst = unify(constraints)
    for left, right in constraints:
        assert subst.apply(left) == subst.apply(right)


@pytest.mark.parametrize("constraints", CONSTRAINT_SETS)
def test_solution_is_idempotent(constraints) -> None:
    subst = unify(constraints)
    for _, typ in subst.items():
        assert subst.apply(typ) == typ


def test_composition_order_matches_recursive_definition() -> None:
    subst = unify(CONSTRAINT_SETS[0])
    assert subst == TypeSubstitution(
        {0: FunctionType(T3, T3), 1: T3, 2: T3},
    )
