"""Basic details about chemical elements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ElementInfo:
    """Name, atomic number and atomic mass of an element."""

    symbol: str
    name: str
    atomic_number: int
    atomic_mass: float

    def describe(self) -> str:
        """Return a short multi-line description of the element."""
        return (
            f"{self.name}\n"
            f"Nr. Atomic: {self.atomic_number}\n"
            f"Masa atomică: {self.atomic_mass!r}"
        )


_ELEMENTS: dict[str, ElementInfo] = {
    info.symbol: info
    for info in (
        ElementInfo("H", "Hidrogen", 1, 1.008),
        ElementInfo("He", "Heliu", 2, 4.0026),
        ElementInfo("Li", "Litiu", 3, 6.94),
    )
}


def element_info(symbol: str) -> ElementInfo | None:
    """Return the details known for ``symbol``, or None if there are none."""
    return _ELEMENTS.get(symbol)


def element_details(symbol: str) -> str:
    """Return the description of ``symbol``, or an empty string if unknown."""
    info = element_info(symbol)
    return info.describe() if info is not None else ""