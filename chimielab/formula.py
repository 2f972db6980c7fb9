"""Parsing of chemical formulas and equation terms."""

from __future__ import annotations

from collections import Counter

VALID_ELEMENTS: frozenset[str] = frozenset(
    {
        "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne", "Na", "Mg", "Al", "Si",
        "P", "S", "Cl", "Ar", "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co",
        "Ni", "Cu", "Zn", "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y",
        "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn", "Sb",
        "Te", "I", "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu",
        "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb", "Lu", "Hf", "Ta", "W", "Re",
        "Os", "Ir", "Pt", "Au", "Hg", "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr",
        "Ra", "Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es",
        "Fm", "Md", "No", "Lr", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg",
        "Cn", "Fl", "Lv", "Ts", "Og",
    }
)

_WHITESPACE = " \t\n\v\f\r"


class UnknownElementError(ValueError):
    """Raised when a formula contains a symbol that is not a chemical element."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Element necunoscut: {symbol}")
        self.symbol = symbol


def _is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_valid_element(symbol: str) -> bool:
    """Return True if ``symbol`` is a known chemical element symbol."""
    return symbol in VALID_ELEMENTS


def parse_formula(formula: str) -> dict[str, int]:
    """Count the atoms of each element in ``formula``.

    Characters that are not letters (including brackets) are skipped, and a
    number after a bracket is ignored. A missing or zero count means one atom.
    The result is ordered by element symbol.
    """
    counts: Counter[str] = Counter()
    i = 0
    size = len(formula)
    while i < size:
        ch = formula[i]
        if not _is_letter(ch):
            i += 1
            continue

        symbol = ch
        if i + 1 < size and _is_lower(formula[i + 1]):
            symbol += formula[i + 1]

        if is_valid_element(symbol):
            i += len(symbol)
        elif is_valid_element(ch):
            symbol = ch
            i += 1
        else:
            raise UnknownElementError(symbol)

        start = i
        while i < size and _is_digit(formula[i]):
            i += 1
        count = int(formula[start:i]) if i > start else 0
        counts[symbol] += count or 1

    return dict(sorted(counts.items()))


def split_terms(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, trimming whitespace and dropping empty parts."""
    stripped = (part.strip(_WHITESPACE) for part in text.split(delimiter))
    return [part for part in stripped if part]