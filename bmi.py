"""
BMI validation and calculation.

BMI = weight_kg / (height_m)^2, where height_m = height_cm / 100.
Inputs arrive as the raw text typed into the form.
"""
import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Lower bound of each category; first match from the top wins.
CATEGORIES = [
    (30.0, "Obese"),
    (25.0, "Overweight"),
    (18.5, "Normal"),
]
UNDERWEIGHT = "Underweight"

# ------------------------ ERRORS ------------------------


class BmiInputError(ValueError):
    """Form input that cannot be used to compute a BMI."""

    message = "Invalid input."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingInput(BmiInputError):
    message = "Please enter both height and weight."


class InvalidHeight(BmiInputError):
    message = "Height must be a positive number."


class InvalidWeight(BmiInputError):
    message = "Weight must be a positive number."


# ------------------------ RESULT ------------------------


@dataclass(frozen=True)
class BmiResult:
    bmi: str
    category: str


# ------------------------ HELPER FUNCTIONS ------------------------


def parse_number(text: str) -> float:
    """Parse user text as a float. Unparseable text gives NaN."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return math.nan


def _is_positive(value: float) -> bool:
    # NaN compares False to everything, so it fails here too
    return math.isfinite(value) and value > 0


def validate(height: str, weight: str):
    """
    Check the raw form values and convert them for the formula.

    Returns (height_m, weight_kg). Raises MissingInput if either field is
    empty, then InvalidHeight / InvalidWeight if the parsed value is not a
    positive number.
    """
    if not height or not weight:
        raise MissingInput()

    height_m = parse_number(height) / 100
    if not _is_positive(height_m):
        raise InvalidHeight()

    weight_kg = parse_number(weight)
    if not _is_positive(weight_kg):
        raise InvalidWeight()

    return height_m, weight_kg


def categorize(bmi: float) -> str:
    for lower_bound, category in CATEGORIES:
        if bmi >= lower_bound:
            return category
    return UNDERWEIGHT


def format_bmi(bmi: float) -> str:
    return f"{bmi:.1f}"


def compute_bmi(height_m: float, weight_kg: float) -> BmiResult:
    denominator = height_m * height_m
    # underflows to 0.0 for heights far below a micrometre
    bmi = weight_kg / denominator if denominator else math.inf
    result = BmiResult(bmi=format_bmi(bmi), category=categorize(bmi))
    logger.debug("BMI for %.2f m, %.2f kg: %r -> %s", height_m, weight_kg, bmi, result)
    return result


def calculate(height: str, weight: str) -> BmiResult:
    """Validate the raw form values and compute the BMI result."""
    height_m, weight_kg = validate(height, weight)
    return compute_bmi(height_m, weight_kg)
