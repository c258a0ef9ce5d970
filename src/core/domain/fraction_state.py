"""
FractionState — сериализуемый снимок канонической дроби

Immutable Pydantic модель для передачи дробей через JSON.
Соответствует схеме src/core/contracts/schema/fraction.json.

Модель не выполняет нормализацию: она принимает только уже канонические
пары и отклоняет остальные, чтобы сериализованное представление было
однозначным.
"""

from pydantic import BaseModel, Field, model_validator

from src.core.math.integer_ops import gcd


# =============================================================================
# FRACTION STATE MODEL
# =============================================================================


class FractionState(BaseModel):
    """
    Снимок дроби num/den.

    Инварианты:
    - den >= 0
    - gcd(num, den) in {0, 1}
    """

    num: int = Field(..., description="Числитель (несёт знак)")
    den: int = Field(..., ge=0, description="Знаменатель (неотрицательный)")

    model_config = {"frozen": True, "strict": True}  # Immutable, без приведения типов

    @model_validator(mode="after")
    def validate_lowest_terms(self) -> "FractionState":
        """Дробь должна быть несократимой."""
        common = gcd(self.num, self.den)
        if common > 1:
            raise ValueError(
                f"Fraction ({self.num}/{self.den}) is not in lowest terms "
                f"(common factor {common})"
            )
        return self
