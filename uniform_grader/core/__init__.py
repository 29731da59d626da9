# Core package
from .constants import (
    Component,
    LetterGrade,
    FeedbackTier,
    COMPONENT_WEIGHTS,
    ScoreThresholds,
    FeedbackThresholds,
    PixelThresholds,
    RegionFractions,
    DEFAULT_COMPONENT_SCORE,
    Messages,
    FileLimits,
)
from .exceptions import (
    BaseAPIException,
    NotFoundException,
    BadRequestException,
    FileProcessingException,
    DatabaseException,
)
from .logger import setup_logger, grading_logger

__all__ = [
    # Constants
    "Component",
    "LetterGrade",
    "FeedbackTier",
    "COMPONENT_WEIGHTS",
    "ScoreThresholds",
    "FeedbackThresholds",
    "PixelThresholds",
    "RegionFractions",
    "DEFAULT_COMPONENT_SCORE",
    "Messages",
    "FileLimits",
    # Exceptions
    "BaseAPIException",
    "NotFoundException",
    "BadRequestException",
    "FileProcessingException",
    "DatabaseException",
    # Logging
    "setup_logger",
    "grading_logger",
]
