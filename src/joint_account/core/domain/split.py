"""
Split — Модели запроса и результата разделения перевода

Immutable Pydantic модели:
- SplitRequest: два дохода и желаемая сумма перевода
- TransferResult: вклад одной стороны (доход переносится для отчёта)

Валидность входов НЕ проверяется при создании модели: NaN, Inf и
отрицательные значения допускаются и отвергаются (или нет) калькулятором.
"""

from pydantic import BaseModel, Field


def format_amount(value: float) -> str:
    """
    Форматирование суммы для отчёта.

    Целые значения печатаются без дробной части (250, а не 250.0),
    остальные через кратчайший repr float.

    Examples:
        >>> format_amount(250.0)
        '250'
        >>> format_amount(333.5)
        '333.5'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


# =============================================================================
# REQUEST
# =============================================================================


class SplitRequest(BaseModel):
    """Входные данные расчёта: доходы обеих сторон и желаемый перевод."""

    first_income: float = Field(..., description="Доход первой стороны")
    second_income: float = Field(..., description="Доход второй стороны")
    desired_total: float = Field(..., description="Сумма, которую нужно перевести вдвоём")

    model_config = {"frozen": True}  # Immutable

    @property
    def total_income(self) -> float:
        """Суммарный доход обеих сторон."""
        return self.first_income + self.second_income

    def swapped(self) -> "SplitRequest":
        """Тот же запрос с переставленными сторонами."""
        return SplitRequest(
            first_income=self.second_income,
            second_income=self.first_income,
            desired_total=self.desired_total,
        )


# =============================================================================
# TRANSFER RESULT
# =============================================================================


class TransferResult(BaseModel):
    """
    Вклад одной стороны.

    Инвариант 0 <= contribution <= income обеспечивается алгоритмом
    расчёта, а не самой моделью.
    """

    income: float = Field(..., description="Исходный доход стороны")
    contribution: float = Field(..., description="Сумма, которую сторона переводит")

    model_config = {"frozen": True}  # Immutable

    @property
    def remaining(self) -> float:
        """Остаток после перевода."""
        return self.income - self.contribution

    def to_dict(self) -> dict[str, float]:
        return {
            "income": self.income,
            "contribution": self.contribution,
            "remaining": self.remaining,
        }

    def __str__(self) -> str:
        return (
            f"Salary {format_amount(self.income)} "
            f"should transfer {format_amount(self.contribution)} "
            f"and remain with {format_amount(self.remaining)}"
        )
