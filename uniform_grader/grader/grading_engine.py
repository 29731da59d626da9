"""
Grading Engine Module
Turns a uniform photo into component scores, feedback and a letter grade
"""
import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union
import logging

from ..core.constants import Component, DEFAULT_COMPONENT_SCORE, LetterGrade, Messages
from .component_scorer import ComponentScores, score_components
from .feedback import generate_feedback
from .grade_aggregator import calculate_final_grade
from .image_processing import ImageBuffer, decode_image, limit_dimensions
from .regions import RegionExtractor

logger = logging.getLogger(__name__)


class GradingStage(str, Enum):
    """Stages of a single grading call"""
    DECODING = "decoding"
    SCORING = "scoring"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class GradingResult:
    """Complete grading result for one photo"""
    final_score: int
    final_grade: LetterGrade
    breakdown: ComponentScores
    feedback: Dict[str, str] = field(default_factory=dict)
    is_fallback: bool = False

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return {
            "final_score": self.final_score,
            "final_grade": self.final_grade.value,
            "breakdown": self.breakdown.to_dict(),
            "feedback": dict(self.feedback),
            "is_fallback": self.is_fallback,
        }


def default_result() -> GradingResult:
    """
    Result used when a photo cannot be decoded: every component at 50,
    grade D, and the same "upload a clearer photo" message everywhere.
    """
    breakdown = ComponentScores(
        **{component.value: DEFAULT_COMPONENT_SCORE for component in Component}
    )
    return GradingResult(
        final_score=DEFAULT_COMPONENT_SCORE,
        final_grade=LetterGrade.D,
        breakdown=breakdown,
        feedback={component.value: Messages.CLEARER_PHOTO for component in Component},
        is_fallback=True,
    )


class GradingEngine:
    """
    Stateless uniform grader.

    Each call decodes and scores from scratch; nothing is cached, so one
    engine can serve concurrent calls.
    """

    def __init__(
        self,
        max_dimension: Optional[int] = None,
        region_extractor: Optional[RegionExtractor] = None
    ):
        """
        Initialize grading engine.

        Args:
            max_dimension: Downscale photos whose larger side exceeds this
            region_extractor: Region extractor (default thresholds if None)
        """
        self.max_dimension = max_dimension
        self.region_extractor = region_extractor or RegionExtractor()

    def _decode(self, image: Union[bytes, bytearray, ImageBuffer]) -> Optional[ImageBuffer]:
        if isinstance(image, ImageBuffer):
            return image
        return decode_image(bytes(image))

    def score(self, image: ImageBuffer) -> GradingResult:
        """
        Score an already decoded image.

        Args:
            image: Decoded RGBA image

        Returns:
            GradingResult
        """
        if self.max_dimension:
            image = limit_dimensions(image, self.max_dimension)

        regions = self.region_extractor.extract(image)
        logger.debug(f"Region stats: {regions.to_dict()}")
        breakdown = score_components(regions)
        feedback = generate_feedback(breakdown)
        final_score, final_grade = calculate_final_grade(breakdown)

        return GradingResult(
            final_score=final_score,
            final_grade=final_grade,
            breakdown=breakdown,
            feedback=feedback,
        )

    def grade(self, image: Union[bytes, bytearray, ImageBuffer]) -> GradingResult:
        """
        Grade a uniform photo.

        Never raises for bad image content: unreadable bytes produce the
        default D result.

        Args:
            image: Encoded image bytes or a decoded ImageBuffer

        Returns:
            GradingResult
        """
        logger.debug(f"Grading stage: {GradingStage.DECODING.value}")
        buffer = self._decode(image)

        if buffer is None:
            logger.warning(
                f"Grading stage: {GradingStage.FAILED.value}, using default result"
            )
            return default_result()

        logger.debug(f"Grading stage: {GradingStage.SCORING.value}")
        result = self.score(buffer)

        logger.info(
            f"Graded {buffer.width}x{buffer.height} photo: "
            f"score={result.final_score}, grade={result.final_grade.value}, "
            f"breakdown={result.breakdown.to_dict()}"
        )
        logger.debug(f"Grading stage: {GradingStage.DONE.value}")
        return result

    async def grade_async(self, image: Union[bytes, bytearray, ImageBuffer]) -> GradingResult:
        """Grade in a worker thread so the event loop stays responsive"""
        return await asyncio.to_thread(self.grade, image)
