"""Worked solution problems: percent concentration and solution volume."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Union

Number = Union[float, int, str]

_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE = " \t\n\v\f\r"

PERCENT_ERROR = "Introduceți valori numerice valide și diferite de zero."
VOLUME_ERROR = "Introduceți valori numerice valide."


class InvalidInputError(ValueError):
    """Raised when a problem receives values it cannot work with."""


@dataclass(frozen=True)
class StepSolution:
    """The numeric answer to a problem and its step-by-step explanation."""

    result: float
    text: str

    @property
    def lines(self) -> list[str]:
        """The explanation split into lines."""
        return self.text.splitlines()

    def __str__(self) -> str:
        return self.text


def parse_number(text: str) -> float:
    """Parse a decimal number typed by a user.

    Surrounding whitespace is allowed; anything else that is not a plain
    decimal number (optionally with sign and exponent) is rejected.
    """
    candidate = text.strip(_WHITESPACE)
    if not _NUMBER_PATTERN.fullmatch(candidate):
        raise InvalidInputError(f"not a number: {text!r}")
    value = float(candidate)
    if not math.isfinite(value):
        raise InvalidInputError(f"not a finite number: {text!r}")
    return value


def _coerce(value: Number, message: str) -> float:
    if isinstance(value, str):
        try:
            return parse_number(value)
        except InvalidInputError:
            raise InvalidInputError(message) from None
    number = float(value)
    if not math.isfinite(number):
        raise InvalidInputError(message)
    return number


def _plain(value: float) -> str:
    """Format a number in its shortest form, without a trailing ``.0``."""
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def percent_concentration(solute_mass: Number, solution_mass: Number) -> StepSolution:
    """Compute c% = solute mass / solution mass × 100 with explanation.

    Masses may be given as numbers or as text. The solution mass must be
    positive.
    """
    solute = _coerce(solute_mass, PERCENT_ERROR)
    solution = _coerce(solution_mass, PERCENT_ERROR)
    if not solution > 0:
        raise InvalidInputError(PERCENT_ERROR)

    concentration = (solute / solution) * 100.0
    text = (
        "Formulă folosită:\n"
        "c% = (masa substanței / masa soluției) × 100\n\n"
        "Înlocuire:\n"
        f"c% = ({_plain(solute)} / {_plain(solution)}) × 100\n\n"
        "Rezultat final:\n"
        f"c% = {concentration:.2f} %\n"
    )
    return StepSolution(concentration, text)


def solution_volume(moles: Number, molarity: Number) -> StepSolution:
    """Compute V = n / Cm with explanation.

    Values may be given as numbers or as text. The molar concentration must
    be positive.
    """
    n = _coerce(moles, VOLUME_ERROR)
    cm = _coerce(molarity, VOLUME_ERROR)
    if not cm > 0:
        raise InvalidInputError(VOLUME_ERROR)

    volume = n / cm
    text = (
        "PASUL 1: Ce cunoaștem:\n"
        f" - Număr de moli n = {n:.2f} mol\n"
        f" - Concentrație molară Cm = {cm:.2f} mol/L\n\n"
        "PASUL 2: Formula utilizată:\n"
        " V = n / Cm\n\n"
        "PASUL 3: Aplicăm valorile:\n"
        f" V = {n:.2f} / {cm:.2f} = {volume:.2f} L\n\n"
        "Rezultat final:\n"
        f" Volumul soluției este: {volume:.2f} L\n"
    )
    return StepSolution(volume, text)