"""Unit tests for Success/Failure result types.

Tests cover:
- Construction and immutability
- is_success()
- map_success() on both cases
- Pattern matching
"""

import pytest

from moneta.core.result import Failure, Success, is_success, map_success
from moneta.domain.errors import Mismatch, Unknown
from moneta.domain.value_objects import Currency
from tests.conftest import eur


@pytest.mark.unit
class TestResultTypes:
    """Test Success and Failure."""

    def test_success_holds_value(self):
        assert Success(value=eur(1)).value == eur(1)

    def test_failure_holds_error(self):
        assert Failure(error=Unknown()).error == Unknown()

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            Success(eur(1))  # type: ignore[misc]

    def test_immutable(self):
        result = Success(value=1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    def test_structural_equality(self):
        assert Success(value=eur(1)) == Success(value=eur(1))
        assert Failure(error=Unknown()) != Success(value=eur(1))


@pytest.mark.unit
class TestResultHelpers:
    """Test is_success and map_success."""

    def test_is_success(self):
        assert is_success(Success(value=1))
        assert not is_success(Failure(error=Unknown()))

    def test_map_success_applies_function(self):
        assert map_success(Success(value=eur(2)), lambda a: -a) == Success(value=eur(-2))

    def test_map_success_passes_failure_through(self):
        failure = Failure(error=Mismatch(Currency.EUR, Currency.USD))
        calls = []

        assert map_success(failure, calls.append) is failure
        assert calls == []

    def test_pattern_matching(self):
        match Failure(error=Unknown()):
            case Success():
                pytest.fail("expected Failure")
            case Failure(error=Unknown()):
                pass
