import math

# (minimum score, grade) from best to worst
GRADE_BANDS = [(90, "A"), (80, "B"), (70, "C"), (60, "D")]
FAILING_GRADE = "F"

# (minimum score, badge color) from best to worst
COLOR_BANDS = [(90, "#22c55e"), (70, "#84cc16"), (50, "#f59e0b"), (30, "#f97316")]
LOWEST_COLOR = "#ef4444"


def clamp_score(value, lower=0, upper=100) -> int:
    """Round half up, then clamp into [lower, upper]."""
    rounded = math.floor(value + 0.5)
    return int(max(lower, min(rounded, upper)))


def get_grade(score) -> str:
    for minimum, grade in GRADE_BANDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE


def get_score_color(score) -> str:
    for minimum, color in COLOR_BANDS:
        if score >= minimum:
            return color
    return LOWEST_COLOR
