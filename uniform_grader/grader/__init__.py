"""
Grader Module
Scores uniform photos from pixel statistics of fixed image regions

Usage:
    from uniform_grader.grader import GradingEngine

    engine = GradingEngine(max_dimension=2048)

    # Grade encoded photo bytes
    with open("uniform.jpg", "rb") as f:
        result = engine.grade(f.read())

    print(result.final_score, result.final_grade, result.feedback["shirt"])
"""

from .image_processing import (
    ImageBuffer,
    decode_image,
    limit_dimensions,
)

from .pixel_statistics import (
    RegionStats,
    compute_region_stats,
)

from .regions import (
    RegionExtractor,
    RegionSet,
)

from .component_scorer import (
    ComponentScores,
    clamp_score,
    score_components,
    score_shirt,
    score_pants,
    score_shoes,
    score_grooming,
    score_cleanliness,
)

from .feedback import (
    FEEDBACK_MESSAGES,
    feedback_tier,
    feedback_for,
    generate_feedback,
)

from .grade_aggregator import (
    calculate_final_score,
    calculate_final_grade,
    score_to_grade,
)

from .grading_engine import (
    GradingEngine,
    GradingResult,
    GradingStage,
    default_result,
)

__all__ = [
    # Image processing
    "ImageBuffer",
    "decode_image",
    "limit_dimensions",
    # Statistics
    "RegionStats",
    "compute_region_stats",
    # Regions
    "RegionExtractor",
    "RegionSet",
    # Scoring
    "ComponentScores",
    "clamp_score",
    "score_components",
    "score_shirt",
    "score_pants",
    "score_shoes",
    "score_grooming",
    "score_cleanliness",
    # Feedback
    "FEEDBACK_MESSAGES",
    "feedback_tier",
    "feedback_for",
    "generate_feedback",
    # Aggregation
    "calculate_final_score",
    "calculate_final_grade",
    "score_to_grade",
    # Engine
    "GradingEngine",
    "GradingResult",
    "GradingStage",
    "default_result",
]
