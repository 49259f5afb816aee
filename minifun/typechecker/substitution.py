from typing import Dict, Iterator, Optional, Tuple

from minifun.typechecker.types import Type


class TypeSubstitution:
    """Represents a type substitution (mapping from type variable ids to types)"""

    def __init__(self, mapping: Optional[Dict[int, Type]] = None):
        self.mapping = mapping or {}

    @classmethod
    def single(cls, var_id: int, typ: Type) -> "TypeSubstitution":
        return cls({var_id: typ})

    def apply(self, t: Type) -> Type:
        """Apply this substitution to a type"""
        return t.substitute(self.mapping)

    def compose(self, other: "TypeSubstitution") -> "TypeSubstitution":
        """Compose two substitutions: (self ∘ other), i.e. ``other`` runs first.

        Entries of ``other`` win over entries of ``self`` with the same key.
        """
        new_mapping = {}

        # Apply self to all mappings in other
        for var, typ in other.mapping.items():
            new_mapping[var] = self.apply(typ)

        # Add mappings from self that aren't in other
        for var, typ in self.mapping.items():
            if var not in new_mapping:
                new_mapping[var] = typ

        return TypeSubstitution(new_mapping)

    def items(self) -> Iterator[Tuple[int, Type]]:
        return iter(self.mapping.items())

    def __contains__(self, var_id: int) -> bool:
        return var_id in self.mapping

    def __getitem__(self, var_id: int) -> Type:
        return self.mapping[var_id]

    def __len__(self) -> int:
        return len(self.mapping)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeSubstitution):
            return NotImplemented
        return self.mapping == other.mapping

    def __repr__(self) -> str:
        return f"TypeSubstitution({self.mapping!r})"

    def __str__(self) -> str:
        if not self.mapping:
            return "∅"
        items = [f"t{var} ↦ {typ}" for var, typ in self.mapping.items()]
        return "{" + ", ".join(items) + "}"


def empty() -> TypeSubstitution:
    return TypeSubstitution()


def compose(s1: TypeSubstitution, s2: TypeSubstitution) -> TypeSubstitution:
    """Substitution equivalent to applying ``s2`` first, then ``s1``"""
    return s1.compose(s2)
