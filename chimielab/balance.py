"""Balancing chemical equations with exact rational arithmetic."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from chimielab.formula import parse_formula, split_terms


class InvalidEquationError(ValueError):
    """Raised when an equation has no ``->`` separator."""

    def __init__(self, message: str = "Ecuație invalidă. Lipseste '->'.") -> None:
        super().__init__(message)


class NoSolutionError(ValueError):
    """Raised when an equation has no non-trivial balancing."""

    def __init__(self, message: str = "Nu s-a găsit o soluție ne-trivială.") -> None:
        super().__init__(message)


def _row_reduce(matrix: list[list[Fraction]], columns: int) -> int:
    """Bring ``matrix`` to reduced row echelon form in place and return its rank."""
    rank = 0
    for c in range(columns):
        pivot = next(
            (r for r in range(rank, len(matrix)) if matrix[r][c] != 0), None
        )
        if pivot is None:
            continue
        matrix[rank], matrix[pivot] = matrix[pivot], matrix[rank]
        pivot_value = matrix[rank][c]
        matrix[rank] = [
            value if j < c else value / pivot_value
            for j, value in enumerate(matrix[rank])
        ]
        pivot_row = matrix[rank]
        for i, row in enumerate(matrix):
            if i == rank:
                continue
            factor = row[c]
            matrix[i] = [
                value if j < c else value - factor * pivot_row[j]
                for j, value in enumerate(row)
            ]
        rank += 1
    return rank


def balance_equation(reactants: Sequence[str], products: Sequence[str]) -> list[int]:
    """Return integer coefficients for reactants followed by products.

    Raises NoSolutionError when only the trivial solution exists.
    """
    formulas = [*reactants, *products]
    n = len(formulas)
    n_reactants = len(reactants)
    compounds = [parse_formula(f) for f in formulas]
    elements = sorted({element for compound in compounds for element in compound})
    row_of = {element: i for i, element in enumerate(elements)}

    matrix = [[Fraction(0)] * n for _ in elements]
    for col, compound in enumerate(compounds):
        sign = 1 if col < n_reactants else -1
        for element, count in compound.items():
            matrix[row_of[element]][col] = Fraction(sign * count)

    rank = _row_reduce(matrix, n)
    if n - rank < 1:
        raise NoSolutionError()

    x = [Fraction(1)] * n
    for i in reversed(range(rank)):
        x[i] = -sum((matrix[i][j] * x[j] for j in range(i + 1, n)), Fraction(0))

    common = math.lcm(*(value.denominator for value in x))
    coefficients = [value.numerator * (common // value.denominator) for value in x]
    if min(coefficients) < 0:
        coefficients = [-c for c in coefficients]
    return coefficients


@dataclass(frozen=True)
class BalancedReaction:
    """A reaction together with its balancing coefficients."""

    reactants: tuple[str, ...]
    products: tuple[str, ...]
    coefficients: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.coefficients) != len(self.reactants) + len(self.products):
            raise ValueError("one coefficient is needed per reactant and product")

    def _terms(self, formulas: Sequence[str], coefficients: Sequence[int]) -> str:
        return " + ".join(
            (f"{c}{f}" if c != 1 else f) for f, c in zip(formulas, coefficients)
        )

    def equation(self) -> str:
        """Return the balanced equation, omitting coefficients equal to one."""
        split = len(self.reactants)
        left = self._terms(self.reactants, self.coefficients[:split])
        right = self._terms(self.products, self.coefficients[split:])
        return f"{left} = {right}"

    def atom_totals(self) -> tuple[dict[str, int], dict[str, int]]:
        """Return atom counts per element for the reactant and product sides."""
        split = len(self.reactants)

        def totals(formulas: Sequence[str], coefficients: Sequence[int]) -> dict[str, int]:
            counter: Counter[str] = Counter()
            for formula, coefficient in zip(formulas, coefficients):
                for element, count in parse_formula(formula).items():
                    counter[element] += count * coefficient
            return dict(sorted(counter.items()))

        return (
            totals(self.reactants, self.coefficients[:split]),
            totals(self.products, self.coefficients[split:]),
        )

    def explanation(self) -> str:
        """Describe, per reactant element, how the two sides compare."""
        reactant_atoms, product_atoms = self.atom_totals()
        lines = ["\n\nExplicație despre echilibrare:\n"]
        for element, reactant_count in reactant_atoms.items():
            product_count = product_atoms.get(element, 0)
            if reactant_count > product_count:
                lines.append(
                    f"- Inițial, existau **{reactant_count}** atomi de **{element}** "
                    f"în reactanți, dar doar **{product_count}** în produși. "
                    "Așadar, s-au adăugat coeficienți pentru a echilibra numărul de atomi.\n"
                )
            elif reactant_count < product_count:
                lines.append(
                    f"- Inițial, existau doar **{reactant_count}** atomi de **{element}** "
                    f"în reactanți, dar **{product_count}** în produși. "
                    "Coeficienții au fost ajustați pentru a menține egalitatea.\n"
                )
            else:
                lines.append(
                    f"- Numărul de atomi de **{element}** este deja echilibrat: "
                    f"**{reactant_count}** pe ambele părți.\n"
                )
        return "".join(lines)

    def report(self) -> str:
        """Return the balanced equation followed by its explanation."""
        return "Reacția echilibrată:\n" + self.equation() + self.explanation()


def solve_reaction(text: str) -> BalancedReaction:
    """Parse an equation of the form ``A + B -> C + D`` and balance it."""
    left, arrow, right = text.partition("->")
    if not arrow:
        raise InvalidEquationError()
    reactants = split_terms(left, "+")
    products = split_terms(right, "+")
    coefficients = balance_equation(reactants, products)
    return BalancedReaction(tuple(reactants), tuple(products), tuple(coefficients))