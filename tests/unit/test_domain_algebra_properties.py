"""Property tests for the monetary algebra.

Uses hypothesis to check the combination rules hold for arbitrary amounts,
not only the values in the operator tables.
"""

from decimal import Decimal

import pytest
from hypothesis import assume, given, settings, strategies as st

from moneta.domain.errors import DivideByZero, Mismatch, Unknown
from moneta.domain.value_objects import Amount, Currency, Outcome

values = st.decimals(
    min_value=Decimal("-1000000"),
    max_value=Decimal("1000000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
currencies = st.sampled_from(list(Currency))
amounts = st.builds(Amount, values, currencies)
errors = st.one_of(
    st.just(Unknown()),
    st.just(DivideByZero()),
    st.builds(Mismatch, currencies, currencies),
)
absorbing_errors = st.one_of(
    st.just(DivideByZero()),
    st.builds(Mismatch, currencies, currencies),
)
outcomes = st.one_of(amounts, errors).map(Outcome)


@pytest.mark.unit
@given(a=values, b=values, currency=currencies)
@settings(max_examples=100)
def test_addition_commutes_within_currency(a, b, currency):
    """a + b == b + a for amounts of one currency."""
    x, y = Amount(a, currency), Amount(b, currency)
    assert x + y == y + x


@pytest.mark.unit
@given(a=values, b=values, c=values, currency=currencies)
@settings(max_examples=100)
def test_addition_associates_within_currency(a, b, c, currency):
    """(a + b) + c == a + (b + c) for two-place amounts."""
    x, y, z = Amount(a, currency), Amount(b, currency), Amount(c, currency)
    assert (x + y) + z == x + (y + z)


@pytest.mark.unit
@given(a=values, b=values, currency=currencies)
@settings(max_examples=100)
def test_subtraction_undoes_addition(a, b, currency):
    """(a + b) - b == a for amounts of one currency."""
    x, y = Amount(a, currency), Amount(b, currency)
    assert (x + y) - y == x


@pytest.mark.unit
@given(x=outcomes)
@settings(max_examples=100)
def test_unknown_is_additive_identity(x):
    """x + Unknown == Unknown + x == x."""
    assert x + Outcome.unknown() == x
    assert Outcome.unknown() + x == x


@pytest.mark.unit
@given(x=outcomes)
@settings(max_examples=100)
def test_subtracting_from_unknown_negates(x):
    """Unknown - x == -x."""
    assert Outcome.unknown() - x == -x


@pytest.mark.unit
@given(error=absorbing_errors, x=outcomes)
@settings(max_examples=100)
def test_absorbing_error_on_left_wins(error, x):
    """Mismatch and DivideByZero held on the left survive any operand."""
    held = Outcome(error)
    assert held + x == error
    assert held - x == error
    assert held * Decimal("3") == error
    assert held / Decimal("0") == error


@pytest.mark.unit
@given(error=absorbing_errors, x=amounts)
@settings(max_examples=100)
def test_absorbing_error_on_right_wins_over_amount(error, x):
    """An amount combined with an absorbing error yields that error."""
    assert x + Outcome(error) == error
    assert x - Outcome(error) == error


@pytest.mark.unit
@given(a=values, first=currencies, second=currencies)
@settings(max_examples=100)
def test_different_currencies_mismatch_in_order(a, first, second):
    """Combining two currencies reports them in operand order."""
    assume(first is not second)
    x, y = Amount(a, first), Amount(a, second)
    assert x + y == Mismatch(first, second)
    assert x - y == Mismatch(first, second)
    assert x.compare(y) is None


@pytest.mark.unit
@given(x=amounts)
@settings(max_examples=100)
def test_negation_is_involution(x):
    """-(-x) == x and x - x is zero."""
    assert -(-x) == x
    assert (x - x).unwrap().is_zero()
    assert abs(-x) == abs(x)


@pytest.mark.unit
@given(x=outcomes)
@settings(max_examples=100)
def test_division_by_zero_never_yields_amount(x):
    """Dividing any outcome by zero leaves no amount behind."""
    result = x / Decimal("0")
    assert result.is_err()
    if not x.is_err() or x.is_unknown():
        assert result == DivideByZero()


@pytest.mark.unit
@given(items=st.lists(values, max_size=20), currency=currencies)
@settings(max_examples=100)
def test_sum_matches_decimal_sum(items, currency):
    """Outcome.sum of one currency matches the sum of the quantities."""
    total = Outcome.sum(Amount(v, currency) for v in items)
    if not items:
        assert total.is_unknown()
    else:
        assert total == Amount(sum(items, Decimal("0")), currency)


@pytest.mark.unit
@given(
    items=st.lists(values, min_size=1, max_size=10),
    error=absorbing_errors,
    position=st.integers(min_value=0, max_value=10),
)
@settings(max_examples=100)
def test_sum_with_absorbing_error_yields_it(items, error, position):
    """An absorbing error anywhere in a single-currency sum poisons it."""
    sequence: list[Amount | Outcome] = [Amount(v, Currency.EUR) for v in items]
    sequence.insert(min(position, len(sequence)), Outcome(error))
    assert Outcome.sum(sequence) == error
