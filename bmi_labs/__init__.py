from bmi_labs.calculator import (
    INVALID_INPUT_MESSAGE,
    BmiResult,
    Measurement,
    calculate,
    calculate_from_text,
    evaluate,
)

__all__ = [
    "INVALID_INPUT_MESSAGE",
    "BmiResult",
    "Measurement",
    "calculate",
    "calculate_from_text",
    "evaluate",
]
