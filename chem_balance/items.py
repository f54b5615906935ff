"""Item model: the building blocks of a chemical formula.

Three variants share one contract:
- Element: an atom symbol with a repeat count      "O2"
- Group:   a parenthesized sub-formula with a count "(SO4)3"
- Entity:  one reactant or product with a charge    "Fe2(SO4)3", "CO3{2-}", "e"

Contract (implemented by every variant):
- add_to_element_names(names): insert the element names found under the item
  into an insertion-ordered name set (a dict with None values)
- count_element(name): atoms of *name* under the item, multiplied through
  nested counts
- format(): canonical text

Items are frozen and own their children as tuples, so an equation is a
strict tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .patterns import ELECTRON, MINUS_SIGN

MAX_COUNT = 255
MIN_CHARGE = -128
MAX_CHARGE = 127


def _check_count(count: int) -> None:
    if not 1 <= count <= MAX_COUNT:
        raise ValueError(f"count must be in [1, {MAX_COUNT}], got {count}")


@dataclass(frozen=True)
class Element:
    name: str
    count: int = 1

    def __post_init__(self):
        _check_count(self.count)

    def add_to_element_names(self, names: dict[str, None]) -> None:
        names.setdefault(self.name, None)

    def count_element(self, name: str) -> int:
        return self.count if self.name == name else 0

    def format(self) -> str:
        return self.name if self.count == 1 else f"{self.name}{self.count}"


@dataclass(frozen=True)
class Group:
    items: tuple[Item, ...]
    count: int = 1

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
        _check_count(self.count)

    def add_to_element_names(self, names: dict[str, None]) -> None:
        for item in self.items:
            item.add_to_element_names(names)

    def count_element(self, name: str) -> int:
        return self.count * sum(item.count_element(name) for item in self.items)

    def format(self) -> str:
        inner = "".join(item.format() for item in self.items)
        return f"({inner})" if self.count == 1 else f"({inner}){self.count}"


@dataclass(frozen=True)
class Entity:
    """One reactant or product.

    A bare electron is an Entity with no items and charge -1. Its only
    "element" is the synthetic name ``e``, counted as ``-charge`` so that
    the electron row of the balance matrix is the charge balance.
    """

    items: tuple[Item, ...]
    charge: int = 0

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
        if not MIN_CHARGE <= self.charge <= MAX_CHARGE:
            raise ValueError(f"charge must be in [{MIN_CHARGE}, {MAX_CHARGE}], got {self.charge}")
        if not self.items and self.charge != -1:
            raise ValueError("only an electron (charge -1) may have no items")

    @property
    def is_electron(self) -> bool:
        return not self.items and self.charge == -1

    def add_to_element_names(self, names: dict[str, None]) -> None:
        names.setdefault(ELECTRON, None)
        for item in self.items:
            item.add_to_element_names(names)

    def count_element(self, name: str) -> int:
        if name == ELECTRON:
            return -self.charge
        return sum(item.count_element(name) for item in self.items)

    def format(self) -> str:
        if self.is_electron:
            return f"{ELECTRON}{MINUS_SIGN}"

        text = "".join(item.format() for item in self.items)
        # |charge| == 1 is written without annotation
        if abs(self.charge) > 1:
            sign = "+" if self.charge > 0 else MINUS_SIGN
            text += f"{{{abs(self.charge)}{sign}}}"
        return text


Item = Union[Element, Group, Entity]
