"""
Grade Aggregation Module
Weighted final score and letter grade
"""
from typing import Tuple

from ..core.constants import COMPONENT_WEIGHTS, Component, LetterGrade, ScoreThresholds
from ..utils.helpers import round_half_up
from .component_scorer import ComponentScores


def weighted_sum(scores: ComponentScores) -> float:
    """Sum of component scores times their weights, unrounded"""
    total = 0.0
    for component in Component:
        total += scores.get(component) * COMPONENT_WEIGHTS[component]
    return total


def calculate_final_score(scores: ComponentScores) -> int:
    """Weighted final score rounded to the nearest integer"""
    return round_half_up(weighted_sum(scores))


def score_to_grade(score: float) -> LetterGrade:
    """
    Classify a 0-100 score into a letter grade.

    Used for engine results and for re-classifying stored scores in
    reports, so both always agree.
    """
    if score >= ScoreThresholds.A:
        return LetterGrade.A
    elif score >= ScoreThresholds.B:
        return LetterGrade.B
    elif score >= ScoreThresholds.C:
        return LetterGrade.C
    elif score >= ScoreThresholds.D:
        return LetterGrade.D
    return LetterGrade.F


def calculate_final_grade(scores: ComponentScores) -> Tuple[int, LetterGrade]:
    """
    Final score and letter grade of a set of component scores.

    Returns:
        (final_score, final_grade)
    """
    final_score = calculate_final_score(scores)
    return final_score, score_to_grade(final_score)
