"""
Feedback Module
Maps component scores to fixed feedback messages
"""
from typing import Dict

from ..core.constants import Component, FeedbackThresholds, FeedbackTier
from .component_scorer import ComponentScores


# One message per tier, in FeedbackTier order (best first)
FEEDBACK_MESSAGES: Dict[Component, Dict[FeedbackTier, str]] = {
    Component.SHIRT: {
        FeedbackTier.EXCELLENT: "Shirt looks excellent. Clean, well-fitted, and properly worn.",
        FeedbackTier.GOOD: "Shirt is good. Consider pressing out any wrinkles.",
        FeedbackTier.NEEDS_ATTENTION: "Shirt needs attention. Ensure it's clean and properly ironed.",
        FeedbackTier.NEEDS_IMPROVEMENT: "Shirt needs improvement. Ensure proper fit and cleanliness.",
        FeedbackTier.BELOW_STANDARD: "Shirt does not meet standards. Replace or clean immediately.",
    },
    Component.PANT: {
        FeedbackTier.EXCELLENT: "Pants are perfect. Neat, clean, and well-maintained.",
        FeedbackTier.GOOD: "Pants look good. Minor adjustments may help.",
        FeedbackTier.NEEDS_ATTENTION: "Pants need attention. Ensure they're clean and wrinkle-free.",
        FeedbackTier.NEEDS_IMPROVEMENT: "Pants need improvement. Ensure proper fit and cleanliness.",
        FeedbackTier.BELOW_STANDARD: "Pants do not meet standards. Replace or clean immediately.",
    },
    Component.SHOES: {
        FeedbackTier.EXCELLENT: "Shoes are excellent. Polished and well-maintained.",
        FeedbackTier.GOOD: "Shoes look good. Consider polishing for better shine.",
        FeedbackTier.NEEDS_ATTENTION: "Shoes need polishing. Ensure they're clean and shiny.",
        FeedbackTier.NEEDS_IMPROVEMENT: "Shoes need significant improvement. Polish and clean them.",
        FeedbackTier.BELOW_STANDARD: "Shoes do not meet standards. Replace or shine immediately.",
    },
    Component.GROOMING: {
        FeedbackTier.EXCELLENT: "Grooming is excellent. Hair neat and well-groomed.",
        FeedbackTier.GOOD: "Grooming looks good. Minor tidying recommended.",
        FeedbackTier.NEEDS_ATTENTION: "Hair needs attention. Ensure it's neat and tidy.",
        FeedbackTier.NEEDS_IMPROVEMENT: "Hair needs significant grooming. Get a proper haircut.",
        FeedbackTier.BELOW_STANDARD: "Hair does not meet standards. Get groomed immediately.",
    },
    Component.CLEANLINESS: {
        FeedbackTier.EXCELLENT: "Overall cleanliness is excellent. Well-maintained uniform.",
        FeedbackTier.GOOD: "Uniform is clean. Keep maintaining this standard.",
        FeedbackTier.NEEDS_ATTENTION: "Uniform needs cleaning. Wash and maintain properly.",
        FeedbackTier.NEEDS_IMPROVEMENT: "Uniform is dirty. Wash immediately.",
        FeedbackTier.BELOW_STANDARD: "Uniform does not meet cleanliness standards. Major cleaning needed.",
    },
}


def feedback_tier(score: float) -> FeedbackTier:
    """Classify a component score into a feedback tier"""
    if score >= FeedbackThresholds.EXCELLENT:
        return FeedbackTier.EXCELLENT
    elif score >= FeedbackThresholds.GOOD:
        return FeedbackTier.GOOD
    elif score >= FeedbackThresholds.NEEDS_ATTENTION:
        return FeedbackTier.NEEDS_ATTENTION
    elif score >= FeedbackThresholds.NEEDS_IMPROVEMENT:
        return FeedbackTier.NEEDS_IMPROVEMENT
    return FeedbackTier.BELOW_STANDARD


def feedback_for(component: Component, score: float) -> str:
    """Feedback message of one component at the given score"""
    return FEEDBACK_MESSAGES[Component(component)][feedback_tier(score)]


def generate_feedback(scores: ComponentScores) -> Dict[str, str]:
    """Feedback for every component, keyed by component name"""
    return {
        component.value: feedback_for(component, scores.get(component))
        for component in Component
    }
