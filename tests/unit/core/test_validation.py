from __future__ import annotations

import pytest

from notiboost.core.validation import (
    validate_api_key,
    validate_max_retries,
    validate_method,
    validate_timeout,
)
from notiboost.exceptions import ConfigurationError

######################################
#     Tests for validate_api_key     #
######################################


def test_validate_api_key_valid() -> None:
    validate_api_key("nb_live_123")


@pytest.mark.parametrize("api_key", [None, "", " \t", 42])
def test_validate_api_key_invalid(api_key: object) -> None:
    with pytest.raises(ConfigurationError, match=r"API key is required"):
        validate_api_key(api_key)


######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 1, 30.0])
def test_validate_timeout_valid(timeout: float) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, 0.0, -1])
def test_validate_timeout_invalid(timeout: float) -> None:
    with pytest.raises(ConfigurationError, match=r"timeout must be > 0"):
        validate_timeout(timeout)


##########################################
#     Tests for validate_max_retries     #
##########################################


@pytest.mark.parametrize("max_retries", [0, 1, 3, 100])
def test_validate_max_retries_valid(max_retries: int) -> None:
    validate_max_retries(max_retries)


@pytest.mark.parametrize("max_retries", [-1, -10])
def test_validate_max_retries_negative(max_retries: int) -> None:
    with pytest.raises(ConfigurationError, match=r"max_retries must be >= 0"):
        validate_max_retries(max_retries)


@pytest.mark.parametrize("max_retries", [True, 1.5, "3"])
def test_validate_max_retries_not_integer(max_retries: object) -> None:
    with pytest.raises(ConfigurationError, match=r"max_retries must be an integer"):
        validate_max_retries(max_retries)


#####################################
#     Tests for validate_method     #
#####################################


@pytest.mark.parametrize(
    ("method", "expected"),
    [("GET", "GET"), ("post", "POST"), ("Put", "PUT"), ("delete", "DELETE")],
)
def test_validate_method_valid(method: str, expected: str) -> None:
    assert validate_method(method) == expected


@pytest.mark.parametrize("method", ["PATCH", "HEAD", "OPTIONS", ""])
def test_validate_method_unsupported(method: str) -> None:
    with pytest.raises(ValueError, match=r"Unsupported HTTP method"):
        validate_method(method)


def test_validate_method_error_is_not_configuration_error() -> None:
    with pytest.raises(ValueError) as exc_info:
        validate_method("PATCH")
    assert not isinstance(exc_info.value, ConfigurationError)
