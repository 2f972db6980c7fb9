import pytest

from chimielab.formula import (
    UnknownElementError,
    is_valid_element,
    parse_formula,
    split_terms,
)


def test_parse_water():
    assert parse_formula("H2O") == {"H": 2, "O": 1}


def test_parse_two_letter_symbols():
    assert parse_formula("NaCl") == {"Cl": 1, "Na": 1}


def test_parse_brackets_are_skipped():
    assert parse_formula("Mg(OH)2") == {"H": 1, "Mg": 1, "O": 1}


def test_repeated_elements_accumulate():
    assert parse_formula("CH3COOH") == parse_formula("C2H4O2")


def test_multi_digit_count():
    assert parse_formula("C12") == {"C": 12}


def test_zero_count_means_one():
    assert parse_formula("H0") == parse_formula("H")


def test_whitespace_is_ignored():
    assert parse_formula(" H2 O ") == parse_formula("H2O")


def test_keys_are_sorted():
    result = parse_formula("OHNaC")
    assert list(result) == sorted(result)


def test_cobalt_versus_carbon_monoxide():
    assert set(parse_formula("Co")) == {"Co"}
    assert set(parse_formula("CO")) == {"C", "O"}


def test_unknown_two_letter_symbol():
    with pytest.raises(UnknownElementError, match="Element necunoscut: Xx") as info:
        parse_formula("Xx2")
    assert info.value.symbol == "Xx"


def test_fallback_then_unknown_lowercase():
    with pytest.raises(UnknownElementError) as info:
        parse_formula("Hx")
    assert info.value.symbol == "x"


def test_unknown_element_is_value_error():
    with pytest.raises(ValueError):
        parse_formula("Q")


def test_empty_formula():
    assert parse_formula("") == {}


def test_split_terms_trims():
    assert split_terms("  H2 + O2  ", "+") == ["H2", "O2"]


def test_split_terms_drops_empty():
    assert split_terms("+H2++O2+", "+") == ["H2", "O2"]


def test_split_terms_empty_text():
    assert split_terms("   ", "+") == []


@pytest.mark.parametrize(
    "symbol, expected",
    [("He", True), ("H", True), ("Og", True), ("Xx", False), ("he", False), ("", False)],
)
def test_is_valid_element(symbol, expected):
    assert is_valid_element(symbol) is expected