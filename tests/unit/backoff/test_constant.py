from __future__ import annotations

import pytest

from notiboost.backoff import ConstantBackoff

#####################################
#     Tests for ConstantBackoff     #
#####################################


@pytest.mark.parametrize("attempt", [0, 1, 7])
def test_constant_backoff_default(attempt: int) -> None:
    assert ConstantBackoff().calculate(attempt) == 1.0


def test_constant_backoff_custom_delay() -> None:
    assert ConstantBackoff(2).calculate(3) == 2.0


def test_constant_backoff_zero_delay() -> None:
    assert ConstantBackoff(0.0).calculate(0) == 0.0


def test_constant_backoff_negative_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantBackoff(-1.0)


def test_constant_backoff_repr() -> None:
    assert repr(ConstantBackoff()) == "ConstantBackoff(delay=1.0)"
