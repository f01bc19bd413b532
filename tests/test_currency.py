"""Tests for INR short-form currency formatting."""

import math

import pytest
from hypothesis import given, strategies as st

from jobboardly.utils.currency import format_currency_inr


@pytest.mark.parametrize(
    "amount,expected",
    [
        (12500000, "₹1.25 Cr"),
        (10000000, "₹1 Cr"),
        (150000, "₹1.5L"),
        (100000, "₹1L"),
        (2500, "₹2.5k"),
        (1000, "₹1k"),
        (500, "₹500"),
        (0, "₹0"),
        (-150000, "₹-1.5L"),
        ("2500", "₹2.5k"),
    ],
)
def test_format_currency_inr(amount, expected):
    assert format_currency_inr(amount) == expected


@pytest.mark.parametrize(
    "amount,expected",
    [
        (1250, "₹1.3k"),
        (3250, "₹3.3k"),
        (-1250, "₹-1.3k"),
        (112500, "₹1.13L"),
        (11250000, "₹1.13 Cr"),
        (100500, "₹1L"),
    ],
)
def test_ties_round_away_from_zero(amount, expected):
    assert format_currency_inr(amount) == expected


@pytest.mark.parametrize("amount", [None, "abc", float("nan"), float("inf"), object()])
def test_unformattable_amounts_render_na(amount):
    assert format_currency_inr(amount) == "N/A"


@given(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e12, max_value=1e12))
def test_finite_amounts_always_get_rupee_prefix(amount):
    assert format_currency_inr(amount).startswith("₹")


@given(st.integers(min_value=10_000_000, max_value=10**12))
def test_crore_amounts_use_cr_suffix(amount):
    assert format_currency_inr(amount).endswith(" Cr")


@given(st.integers(min_value=100_000, max_value=9_940_000))
def test_lakh_amounts_use_l_suffix(amount):
    formatted = format_currency_inr(amount)
    assert formatted.endswith("L")
    assert math.isclose(float(formatted[1:-1]), amount / 100_000, abs_tol=0.005)
