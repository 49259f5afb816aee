"""
Type representations for the monomorphic Hindley-Milner engine
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from minifun.typechecker.substitution import TypeSubstitution


class Type(ABC):
    """Base class for all types"""

    @abstractmethod
    def has_tvar(self, var_id: int) -> bool:
        """Return True if the type variable ``var_id`` occurs in this type"""
        pass

    @abstractmethod
    def substitute(self, mapping: Dict[int, "Type"]) -> "Type":
        """Replace type variables found in ``mapping`` in a single pass"""
        pass

    def apply_substitution(self, subst: "TypeSubstitution") -> "Type":
        """Apply a TypeSubstitution to this type"""
        return self.substitute(subst.mapping)

    @abstractmethod
    def __str__(self) -> str:
        pass


@dataclass(frozen=True)
class IntType(Type):
    def has_tvar(self, var_id: int) -> bool:
        return False

    def substitute(self, mapping: Dict[int, Type]) -> Type:
        return self

    def __str__(self) -> str:
        return "Int"


@dataclass(frozen=True)
class BoolType(Type):
    def has_tvar(self, var_id: int) -> bool:
        return False

    def substitute(self, mapping: Dict[int, Type]) -> Type:
        return self

    def __str__(self) -> str:
        return "Bool"


@dataclass(frozen=True)
class TypeVar(Type):
    """Type variable, identified by the counter value it was allocated with"""

    id: int

    def has_tvar(self, var_id: int) -> bool:
        return self.id == var_id

    def substitute(self, mapping: Dict[int, Type]) -> Type:
        return mapping.get(self.id, self)

    def __str__(self) -> str:
        return f"t{self.id}"


@dataclass(frozen=True)
class FunctionType(Type):
    """Function type (e.g., Int -> Bool, t0 -> t1)"""

    param: Type
    result: Type

    def has_tvar(self, var_id: int) -> bool:
        return self.param.has_tvar(var_id) or self.result.has_tvar(var_id)

    def substitute(self, mapping: Dict[int, Type]) -> Type:
        return FunctionType(
            self.param.substitute(mapping),
            self.result.substitute(mapping),
        )

    def __str__(self) -> str:
        # Handle right associativity of function types
        if isinstance(self.param, FunctionType):
            return f"({self.param}) -> {self.result}"
        else:
            return f"{self.param} -> {self.result}"


# Built-in types
INT_TYPE = IntType()
BOOL_TYPE = BoolType()

Constraint = Tuple[Type, Type]


def has_tvar(typ: Type, var_id: int) -> bool:
    """Occurs test used by the unifier"""
    return typ.has_tvar(var_id)


def apply(subst: "TypeSubstitution", typ: Type) -> Type:
    return typ.apply_substitution(subst)


def apply_constraints(
    subst: "TypeSubstitution",
    constraints: List[Constraint],
) -> List[Constraint]:
    """Apply a substitution to both sides of every constraint, keeping order"""
    return [(apply(subst, left), apply(subst, right)) for left, right in constraints]


def format_constraint(constraint: Constraint) -> str:
    left, right = constraint
    return f"{left} ~ {right}"
