"""
Application constants
"""
from enum import Enum


class Component(str, Enum):
    """Uniform components graded from a photo"""
    SHIRT = "shirt"
    PANT = "pant"
    SHOES = "shoes"
    GROOMING = "grooming"
    CLEANLINESS = "cleanliness"


class LetterGrade(str, Enum):
    """Letter grades, best first"""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class FeedbackTier(str, Enum):
    """Feedback tiers, best first"""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_ATTENTION = "needs attention"
    NEEDS_IMPROVEMENT = "needs improvement"
    BELOW_STANDARD = "does not meet standards"


# Weight of each component in the final score (sums to 1.0)
COMPONENT_WEIGHTS = {
    Component.SHIRT: 0.25,
    Component.PANT: 0.25,
    Component.SHOES: 0.20,
    Component.GROOMING: 0.15,
    Component.CLEANLINESS: 0.15,
}


class ScoreThresholds:
    """Final score cutoffs for letter grades"""
    A = 85
    B = 70
    C = 60
    D = 50


class FeedbackThresholds:
    """Component score cutoffs for feedback tiers"""
    EXCELLENT = 90
    GOOD = 75
    NEEDS_ATTENTION = 60
    NEEDS_IMPROVEMENT = 45


class PixelThresholds:
    """Brightness cutoffs used when counting pixels"""
    DARK = 100
    WHITE = 200
    # Region specific dark cutoffs
    SHOES_DARK = 120
    GROOMING_DARK = 80


class RegionFractions:
    """Height fractions of the fixed sampling regions"""
    BOTTOM_STRIP = 0.15
    TOP_STRIP = 0.30


# Score used for every component when a photo cannot be analysed
DEFAULT_COMPONENT_SCORE = 50


# API Response Messages
class Messages:
    """API response messages"""

    # Success messages
    GRADE_SAVED = "Grade saved successfully"

    # Error messages
    CLEARER_PHOTO = "Please upload a clear photo of your uniform."
    FILENAME_REQUIRED = "Filename is required"
    INVALID_FILE_TYPE = "Unsupported image file type"
    FILE_TOO_LARGE = "Image file exceeds the size limit"
    DATABASE_DRIVER_MISSING = "pyodbc not installed"


# File size limits (in bytes)
class FileLimits:
    """File size limits"""
    MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10MB
