"""
Unit tests for feedback mapping and grade aggregation
"""
import pytest

from uniform_grader.core import COMPONENT_WEIGHTS, Component, FeedbackTier, LetterGrade
from uniform_grader.grader import (
    FEEDBACK_MESSAGES,
    ComponentScores,
    calculate_final_grade,
    calculate_final_score,
    feedback_for,
    feedback_tier,
    generate_feedback,
    score_to_grade,
)


class TestFeedbackTier:
    """Test cases for feedback_tier"""

    @pytest.mark.parametrize("score,tier", [
        (100, FeedbackTier.EXCELLENT),
        (90, FeedbackTier.EXCELLENT),
        (89, FeedbackTier.GOOD),
        (75, FeedbackTier.GOOD),
        (74, FeedbackTier.NEEDS_ATTENTION),
        (60, FeedbackTier.NEEDS_ATTENTION),
        (59, FeedbackTier.NEEDS_IMPROVEMENT),
        (45, FeedbackTier.NEEDS_IMPROVEMENT),
        (44, FeedbackTier.BELOW_STANDARD),
        (0, FeedbackTier.BELOW_STANDARD),
    ])
    def test_tier_boundaries(self, score, tier):
        assert feedback_tier(score) == tier


class TestFeedbackMessages:
    """Test cases for feedback text"""

    def test_every_component_has_five_distinct_messages(self):
        for component in Component:
            messages = FEEDBACK_MESSAGES[component]
            assert set(messages) == set(FeedbackTier)
            assert all(messages.values())
            assert len(set(messages.values())) == 5

    def test_messages_are_component_specific(self):
        shirt = feedback_for(Component.SHIRT, 95)
        shoes = feedback_for(Component.SHOES, 95)
        assert shirt != shoes
        assert "Shirt" in shirt
        assert "Shoes" in shoes

    def test_feedback_for_accepts_names(self):
        assert feedback_for("pant", 80) == FEEDBACK_MESSAGES[Component.PANT][FeedbackTier.GOOD]

    def test_generate_feedback_keys(self):
        scores = ComponentScores(shirt=90, pant=89, shoes=45, grooming=44, cleanliness=60)
        feedback = generate_feedback(scores)

        assert list(feedback) == ["shirt", "pant", "shoes", "grooming", "cleanliness"]
        assert feedback["shirt"] == FEEDBACK_MESSAGES[Component.SHIRT][FeedbackTier.EXCELLENT]
        assert feedback["pant"] == FEEDBACK_MESSAGES[Component.PANT][FeedbackTier.GOOD]
        assert feedback["shoes"] == FEEDBACK_MESSAGES[Component.SHOES][FeedbackTier.NEEDS_IMPROVEMENT]
        assert feedback["grooming"] == FEEDBACK_MESSAGES[Component.GROOMING][FeedbackTier.BELOW_STANDARD]
        assert feedback["cleanliness"] == FEEDBACK_MESSAGES[Component.CLEANLINESS][FeedbackTier.NEEDS_ATTENTION]


class TestGradeAggregator:
    """Test cases for final score and grade"""

    def test_weights_sum_to_one(self):
        assert sum(COMPONENT_WEIGHTS.values()) == pytest.approx(1.0)
        assert set(COMPONENT_WEIGHTS) == set(Component)

    @pytest.mark.parametrize("score,grade", [
        (100, LetterGrade.A),
        (85, LetterGrade.A),
        (84, LetterGrade.B),
        (70, LetterGrade.B),
        (69, LetterGrade.C),
        (60, LetterGrade.C),
        (59, LetterGrade.D),
        (50, LetterGrade.D),
        (49, LetterGrade.F),
        (0, LetterGrade.F),
    ])
    def test_grade_boundaries(self, score, grade):
        assert score_to_grade(score) == grade

    def test_grade_for_fractional_stored_scores(self):
        assert score_to_grade(84.99) == LetterGrade.B
        assert score_to_grade(49.5) == LetterGrade.F

    def test_uniform_scores(self):
        scores = ComponentScores(shirt=50, pant=50, shoes=50, grooming=50, cleanliness=50)
        assert calculate_final_grade(scores) == (50, LetterGrade.D)

    def test_weighted_sum(self):
        scores = ComponentScores(shirt=90, pant=75, shoes=45, grooming=90, cleanliness=90)
        # 22.5 + 18.75 + 9 + 13.5 + 13.5 = 77.25
        assert calculate_final_score(scores) == 77

    def test_half_rounds_up(self):
        scores = ComponentScores(shirt=85, pant=100, shoes=75, grooming=100, cleanliness=75)
        # 21.25 + 25 + 15 + 15 + 11.25 = 87.5
        assert calculate_final_score(scores) == 88

    def test_matches_weighted_sum(self):
        scores = ComponentScores(shirt=30, pant=61, shoes=97, grooming=12, cleanliness=100)
        expected = sum(scores.get(c) * w for c, w in COMPONENT_WEIGHTS.items())
        assert calculate_final_score(scores) == int(expected + 0.5)

    def test_extremes(self):
        best = ComponentScores(shirt=100, pant=100, shoes=100, grooming=100, cleanliness=100)
        worst = ComponentScores(shirt=0, pant=0, shoes=0, grooming=0, cleanliness=0)
        assert calculate_final_grade(best) == (100, LetterGrade.A)
        assert calculate_final_grade(worst) == (0, LetterGrade.F)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
