from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .items import Entity

NBSP = "\u00a0"


@dataclass(frozen=True)
class Equation:
    """Reactants and products of a chemical equation.

    Entities are kept in input order; that order fixes the matrix columns
    (reactants first, then products) and the coefficient order.
    """

    reactants: tuple[Entity, ...]
    products: tuple[Entity, ...]

    def __post_init__(self):
        object.__setattr__(self, "reactants", tuple(self.reactants))
        object.__setattr__(self, "products", tuple(self.products))

    @property
    def entities(self) -> tuple[Entity, ...]:
        return self.reactants + self.products

    def element_names(self) -> list[str]:
        """Distinct element names (plus the electron name) in discovery order."""
        names: dict[str, None] = {}
        for entity in self.entities:
            entity.add_to_element_names(names)
        return list(names)

    def format(self, coefficients: Sequence[int]) -> str:
        """Render the equation with *coefficients* (reactants then products).

        A zero coefficient drops the term, a coefficient of 1 is implicit and
        missing trailing coefficients count as 1.
        """
        n = len(self.reactants)
        return " = ".join([
            _format_entities(self.reactants, coefficients[:n]),
            _format_entities(self.products, coefficients[n:]),
        ])


def _format_entities(entities: Sequence[Entity], coefficients: Sequence[int]) -> str:
    terms: list[str] = []
    for i, entity in enumerate(entities):
        coefficient = int(coefficients[i]) if i < len(coefficients) else 1
        if coefficient == 0:
            continue
        prefix = "" if coefficient == 1 else f"{coefficient}{NBSP}"
        terms.append(prefix + entity.format())
    return " + ".join(terms)
