"""
BMI calculation.

BMI = weight_kg / (height_m)²
"""
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

INVALID_INPUT_MESSAGE = "Invalid input values"


class Measurement(BaseModel):
    model_config = ConfigDict(frozen=True)

    height: float  # meters
    weight: float  # kilograms

    @property
    def is_valid(self) -> bool:
        return (
            math.isfinite(self.height)
            and math.isfinite(self.weight)
            and self.height > 0
            and self.weight > 0
        )


class BmiResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    bmi: Optional[float] = None
    message: str

    @property
    def is_valid(self) -> bool:
        return self.bmi is not None


INVALID_RESULT = BmiResult(message=INVALID_INPUT_MESSAGE)


def evaluate(measurement: Measurement) -> BmiResult:
    if not measurement.is_valid:
        return INVALID_RESULT

    # heights near the bottom of the float range square to zero or overflow the quotient
    height_squared = measurement.height * measurement.height
    if height_squared == 0:
        return INVALID_RESULT
    bmi = measurement.weight / height_squared
    if not math.isfinite(bmi):
        return INVALID_RESULT

    return BmiResult(bmi=round(bmi, 2), message=f"Your BMI is {bmi:.2f}")


def calculate(height: float, weight: float) -> str:
    """
    Calculate BMI given height in meters and weight in kg.

    Returns "Your BMI is <bmi>" with two decimals, or "Invalid input values"
    when either value is not strictly positive or the result is not a finite number.
    """
    try:
        measurement = Measurement(height=height, weight=weight)
    except ValidationError:
        return INVALID_INPUT_MESSAGE
    return evaluate(measurement).message


def _parse(text: str) -> Optional[float]:
    try:
        return float(text.strip())
    except (AttributeError, ValueError):
        return None


def calculate_from_text(height_text: str, weight_text: str) -> str:
    """Same as calculate() for raw text field contents."""
    height = _parse(height_text)
    weight = _parse(weight_text)
    if height is None or weight is None:
        return INVALID_INPUT_MESSAGE
    return calculate(height, weight)
