"""Proportional Split — разделение перевода между двумя доходами

Обе стороны должны остаться с одинаковым остатком после перевода:

    total          = first_income + second_income
    remaining_each = (total - desired_total) / 2
    contribution_i = income_i - remaining_each

Если одна из сторон не может выйти на общий остаток (её вклад получается
отрицательным), её вклад обнуляется, а весь перевод ложится на другую.

Порядок проверок:
1. Валидация входов (опционально, по умолчанию включена)
2. total < desired_total → InsufficientFunds
3. Предварительный вклад каждой стороны
4. Коррекция знака (сначала первая сторона, затем вторая)

Для двух сторон оба предварительных вклада не могут быть отрицательными
одновременно при total >= desired_total, поэтому порядок шага 4 снаружи
не наблюдаем.
"""

import logging
from dataclasses import dataclass
from typing import Final, Iterator

from joint_account.core.domain.split import SplitRequest, TransferResult
from joint_account.core.math.numerical_safeguards import (
    is_sign_negative,
    validate_non_negative,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

NOT_ENOUGH_MONEY_MESSAGE: Final[str] = "Not enough money for the desired transfer in total"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculationError(Exception):
    """Базовая ошибка расчёта разделения."""

    pass


class InsufficientFunds(CalculationError):
    """
    Суммарного дохода не хватает на желаемый перевод.

    Терминальная ситуация для данной тройки входов: повтор с теми же
    значениями даст тот же результат.
    """

    def __init__(self, total_income: float, desired_total: float):
        self.total_income = total_income
        self.desired_total = desired_total
        super().__init__(NOT_ENOUGH_MONEY_MESSAGE)


class InvalidSplitInput(CalculationError, ValueError):
    """Отрицательный или не-конечный (NaN/Inf) входной параметр."""

    pass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SplitResult:
    """Результат расчёта: вклады обеих сторон в порядке входов."""

    first: TransferResult
    second: TransferResult
    desired_total: float

    @property
    def total_contribution(self) -> float:
        return self.first.contribution + self.second.contribution

    def __iter__(self) -> Iterator[TransferResult]:
        # first, second = result
        return iter((self.first, self.second))

    def to_dict(self) -> dict:
        """Payload по контракту split_result."""
        return {
            "desired_total": self.desired_total,
            "transfers": [self.first.to_dict(), self.second.to_dict()],
        }


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SplitCalculatorConfig:
    """Конфигурация калькулятора.

    sign_bit_negativity: отрицательность вклада определяется по знаковому
        биту, так что -0.0 тоже запускает коррекцию. При False используется
        обычное сравнение `< 0`.
    validate_inputs: отвергать отрицательные и NaN/Inf входы
        (InvalidSplitInput) до расчёта.
    """

    sign_bit_negativity: bool = True
    validate_inputs: bool = True


# =============================================================================
# CALCULATOR
# =============================================================================


class ProportionalSplitCalculator:
    """Калькулятор разделения перевода между двумя сторонами."""

    def __init__(self, config: SplitCalculatorConfig | None = None):
        self.config = config or SplitCalculatorConfig()

    def _is_negative(self, value: float) -> bool:
        if self.config.sign_bit_negativity:
            return is_sign_negative(value)
        return value < 0

    def _validate(self, request: SplitRequest) -> None:
        for name in ("first_income", "second_income", "desired_total"):
            try:
                validate_non_negative(getattr(request, name), name)
            except ValueError as e:
                raise InvalidSplitInput(str(e)) from e

    def calculate(self, request: SplitRequest) -> SplitResult:
        """Расчёт вкладов обеих сторон.

        Args:
            request: доходы и желаемая сумма перевода

        Returns:
            SplitResult с вкладами в порядке входов

        Raises:
            InvalidSplitInput: при включённой валидации, если вход
                отрицательный или NaN/Inf
            InsufficientFunds: если first_income + second_income < desired_total
        """
        if self.config.validate_inputs:
            self._validate(request)

        total = request.first_income + request.second_income
        if total < request.desired_total:
            raise InsufficientFunds(total, request.desired_total)

        remaining_each = (total - request.desired_total) / 2.0

        first = request.first_income - remaining_each
        second = request.second_income - remaining_each
        logger.debug(
            "Tentative split: first=%r second=%r remaining_each=%r",
            first,
            second,
            remaining_each,
        )

        if self._is_negative(first):
            logger.debug("First contribution %r is negative, second covers the transfer", first)
            first, second = 0.0, request.desired_total
        elif self._is_negative(second):
            logger.debug("Second contribution %r is negative, first covers the transfer", second)
            first, second = request.desired_total, 0.0

        return SplitResult(
            first=TransferResult(income=request.first_income, contribution=first),
            second=TransferResult(income=request.second_income, contribution=second),
            desired_total=request.desired_total,
        )


def compute(
    first_income: float,
    second_income: float,
    desired_total: float,
    config: SplitCalculatorConfig | None = None,
) -> SplitResult:
    """
    Разделение desired_total между двумя доходами.

    Examples:
        >>> first, second = compute(1500.0, 2000.0, 1000.0)
        >>> first.contribution, second.contribution
        (250.0, 750.0)
    """
    request = SplitRequest(
        first_income=first_income,
        second_income=second_income,
        desired_total=desired_total,
    )
    return ProportionalSplitCalculator(config).calculate(request)
