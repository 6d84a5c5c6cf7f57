"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Знаковый бит float (-0.0 vs +0.0)
2. NaN/Inf проверки
3. Epsilon-сравнения
4. Валидацию параметров
"""

import pytest

from joint_account.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    is_close,
    is_sign_negative,
    is_valid_float,
    validate_finite,
    validate_non_negative,
)


class TestIsSignNegative:
    def test_negative_values(self) -> None:
        assert is_sign_negative(-1.0) is True
        assert is_sign_negative(-1e-300) is True
        assert is_sign_negative(float("-inf")) is True

    def test_positive_values(self) -> None:
        assert is_sign_negative(1.0) is False
        assert is_sign_negative(float("inf")) is False

    def test_signed_zero(self) -> None:
        """-0.0 отрицательный по знаковому биту, хотя -0.0 < 0 ложно"""
        assert is_sign_negative(-0.0) is True
        assert is_sign_negative(0.0) is False
        assert (-0.0 < 0) is False


class TestIsValidFloat:
    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    def test_non_finite(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsClose:
    def test_float_error_tolerated(self) -> None:
        assert is_close(0.1 + 0.2, 0.3)

    def test_near_zero(self) -> None:
        assert is_close(0.0, EPS_FLOAT_COMPARE_ABS / 2)

    def test_different(self) -> None:
        assert not is_close(1.0, 1.1)


class TestValidation:
    def test_validate_finite(self) -> None:
        validate_finite(10.0, "x")
        with pytest.raises(ValueError, match="x must be a valid float"):
            validate_finite(float("nan"), "x")

    def test_validate_non_negative(self) -> None:
        validate_non_negative(0.0, "x")
        validate_non_negative(-0.0, "x")
        validate_non_negative(100.0, "x")

    def test_validate_non_negative_rejects(self) -> None:
        with pytest.raises(ValueError, match="must be non-negative"):
            validate_non_negative(-0.01, "income")
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_non_negative(float("inf"), "income")
