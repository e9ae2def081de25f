"""BMI arithmetic and form-field validation."""

import math

# (upper bound, label); values at or above the last bound are "Obese".
CATEGORIES = [
    (18.5, "Underweight"),
    (24.9, "Normal weight"),
    (29.9, "Overweight"),
]


def parse_positive(raw: str | None, label: str, errors: list[str]) -> float | None:
    """Parse one form field, appending a message to `errors` when it is unusable."""
    raw = (raw or "").strip()
    if not raw:
        errors.append(f"{label} is required")
        return None
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or value <= 0:
        errors.append(f"{label} must be a positive number")
        return None
    return value


def validate(weight: str | None, height: str | None):
    errors: list[str] = []
    w = parse_positive(weight, "Weight", errors)
    h = parse_positive(height, "Height", errors)
    return w, h, errors


def calculate_bmi(weight: float, height: float) -> float:
    return weight / (height ** 2)


def classify(bmi: float) -> str:
    for bound, label in CATEGORIES:
        if bmi < bound:
            return label
    return "Obese"
