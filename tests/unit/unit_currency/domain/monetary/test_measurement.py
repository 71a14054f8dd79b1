from __future__ import annotations

import itertools

import pytest

from unit_currency.domain.monetary.currency_code import CurrencyCode
from unit_currency.domain.monetary.currency_unit import CurrencyUnit
from unit_currency.domain.monetary.currency_registry import USD, EUR, GBP, RUR, JPY, AUD, CAD, AMD
from unit_currency.domain.monetary.measurement import Measurement

CATALOG = [USD, EUR, GBP, RUR, JPY, AUD, CAD, AMD]
AMOUNTS = [0.0, 1.0, -500.0, 1e9]


def test_convert_amd_to_usd():
    """Converting 500 AMD to USD replaces the unit and scales by the AMD coefficient."""
    amd500 = Measurement(500.0, AMD)
    amd500.convert(USD)

    assert amd500.unit == USD
    assert amd500.value == 500.0 * 0.00209872


@pytest.mark.parametrize("unit", CATALOG)
def test_round_trip_through_base_unit(unit):
    amount = Measurement(123.45, unit)

    amount.convert(unit.base_unit())
    amount.convert(unit)

    assert amount.unit == unit
    assert amount.value == pytest.approx(123.45)


@pytest.mark.parametrize("source, target", list(itertools.product(CATALOG, CATALOG)))
def test_round_trip_between_any_two_currencies(source, target):
    for x in AMOUNTS:
        amount = Measurement(x, source)
        amount.convert(target)
        amount.convert(source)
        assert amount.value == pytest.approx(x)


def test_convert_to_same_unit_keeps_value_exactly():
    value = 0.1 + 0.2
    amount = Measurement(value, RUR)
    amount.convert(RUR)
    assert amount.value == value
    assert amount.unit is RUR


def test_converted_returns_new_measurement():
    original = Measurement(100, EUR)
    in_gbp = original.converted(GBP)

    assert original.unit == EUR
    assert original.value == 100.0
    assert in_gbp.unit == GBP
    assert in_gbp.value == pytest.approx(100 * 1.123349 / 1.25025)


def test_convert_rejects_unit_with_other_base():
    class Grams:
        coefficient = 1.0

        @classmethod
        def base_unit(cls):
            return "gram"

    with pytest.raises(ValueError):
        Measurement(1, EUR).convert(Grams())


def test_init_validates_value_and_unit():
    assert Measurement("12.5", EUR).value == 12.5

    with pytest.raises(ValueError):
        Measurement("abc", EUR)
    with pytest.raises(TypeError):
        Measurement(1, "EUR")


def test_same_unit_arithmetic_and_comparison():
    a = Measurement(10, CAD)
    b = Measurement(4, CAD)

    assert a + b == Measurement(14, CAD)
    assert a - b == Measurement(6, CAD)
    assert a * 2 == Measurement(20, CAD)
    assert 2 * a == Measurement(20, CAD)
    assert a / 4 == Measurement(2.5, CAD)
    assert a / b == 2.5
    assert -a == Measurement(-10, CAD)
    assert abs(Measurement(-3, CAD)) == Measurement(3, CAD)
    assert b < a
    assert a >= b


def test_mixed_unit_operations_raise():
    """Different denominations are never combined implicitly."""
    eur = Measurement(1, EUR)
    usd = Measurement(1, USD)

    with pytest.raises(ValueError):
        eur + usd
    with pytest.raises(ValueError):
        eur < usd
    assert eur != usd


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Measurement(1, USD) / 0
    with pytest.raises(ZeroDivisionError):
        Measurement(1, USD) / Measurement(0, USD)


def test_duplicate_unit_is_treated_as_equal():
    """A duplicate EUR with another coefficient is equal to EUR, so the amount is not rescaled."""
    fake_eur = CurrencyUnit("€", CurrencyCode.EUR, 2.0)
    amount = Measurement(10, fake_eur)
    amount.convert(EUR)

    assert amount.value == 10.0
    assert amount.unit is EUR


def test_convert_to_equal_unit_replaces_unit():
    fake_eur = CurrencyUnit("€", CurrencyCode.EUR, 2.0)
    amount = Measurement(10, EUR)
    in_fake_eur = amount.converted(fake_eur)

    assert in_fake_eur.value == 10.0
    assert in_fake_eur.unit is fake_eur
    assert amount.unit is EUR


def test_measurement_is_not_hashable():
    with pytest.raises(TypeError):
        hash(Measurement(1, USD))


def test_string_round_trip():
    amount = Measurement(500.0, AMD)
    assert str(amount) == "500.0 AMD"
    assert repr(amount) == "Measurement(500.0, AMD)"
    assert Measurement.from_str("500.0 AMD") == amount
    assert Measurement.from_str(" 7 jpy ").unit is JPY


@pytest.mark.parametrize("text", ["", "500", "500 AMD extra", "abc AMD", "500 XXX"])
def test_from_str_rejects_invalid_input(text):
    with pytest.raises(ValueError):
        Measurement.from_str(text)
