"""
Component Scoring Module
Rule-based 0-100 scores for each uniform component

Every rule starts from 100 and subtracts stacking deductions. Checks in
the same if/elif chain are mutually exclusive; separate checks add up.
"""
from dataclasses import dataclass, asdict
from typing import Dict

from ..core.constants import Component
from .pixel_statistics import RegionStats
from .regions import RegionSet

MAX_SCORE = 100
MIN_SCORE = 0


@dataclass(frozen=True)
class ComponentScores:
    """Clamped score of every uniform component"""
    shirt: int
    pant: int
    shoes: int
    grooming: int
    cleanliness: int

    def get(self, component: Component) -> int:
        return getattr(self, Component(component).value)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def clamp_score(score: float) -> int:
    """Clamp a raw score into [0, 100]"""
    return int(max(MIN_SCORE, min(MAX_SCORE, score)))


def score_shirt(full: RegionStats) -> int:
    """
    Shirt: overall lighting, color consistency, shadows and some white
    fabric across the whole photo.
    """
    score = MAX_SCORE

    if full.avg_brightness < 80:
        score -= 20
    elif full.avg_brightness > 220:
        score -= 10

    if full.color_variation > 100:
        score -= 15
    elif full.color_variation > 50:
        score -= 5

    if full.dark_pixel_ratio > 0.4:
        score -= 20
    elif full.dark_pixel_ratio > 0.25:
        score -= 10

    if full.white_pixel_ratio < 0.05:
        score -= 15

    return clamp_score(score)


def score_pants(lower_half: RegionStats, full: RegionStats) -> int:
    """Pants: moderately dark lower half, color variation of the full photo."""
    score = MAX_SCORE
    brightness = lower_half.avg_brightness

    if brightness < 50 or brightness > 160:
        score -= 25
    elif brightness < 60 or brightness > 150:
        score -= 10

    if full.color_variation > 80:
        score -= 15

    if lower_half.dark_pixel_ratio > 0.5:
        score -= 15
    elif lower_half.dark_pixel_ratio > 0.3:
        score -= 8

    return clamp_score(score)


def score_shoes(bottom_strip: RegionStats, full: RegionStats) -> int:
    """Shoes: the bottom strip should be fairly dark, the photo not too dark."""
    score = MAX_SCORE
    brightness = bottom_strip.avg_brightness

    if brightness < 40 or brightness > 180:
        score -= 30
    elif brightness < 50 or brightness > 160:
        score -= 15

    if bottom_strip.dark_pixel_ratio < 0.2:
        score -= 25
    elif bottom_strip.dark_pixel_ratio < 0.35:
        score -= 10

    if full.avg_brightness < 70:
        score -= 10

    return clamp_score(score)


def score_grooming(top_strip: RegionStats, full: RegionStats) -> int:
    """Grooming: well lit head area without heavy shadows."""
    score = MAX_SCORE

    if top_strip.avg_brightness < 90:
        score -= 20
    elif top_strip.avg_brightness > 230:
        score -= 10

    if top_strip.dark_pixel_ratio > 0.4:
        score -= 25
    elif top_strip.dark_pixel_ratio > 0.25:
        score -= 10

    if full.color_variation > 120:
        score -= 15

    return clamp_score(score)


def score_cleanliness(full: RegionStats) -> int:
    """Cleanliness: bright photo, few dark (stain) pixels, some color."""
    score = MAX_SCORE

    if full.avg_brightness < 100:
        score -= 25
    elif full.avg_brightness < 120:
        score -= 10

    if full.dark_pixel_ratio > 0.45:
        score -= 25
    elif full.dark_pixel_ratio > 0.35:
        score -= 15
    elif full.dark_pixel_ratio > 0.25:
        score -= 8

    if full.white_pixel_ratio < 0.1:
        score -= 15
    elif full.white_pixel_ratio < 0.15:
        score -= 5

    if full.color_variation < 15:
        score -= 10

    return clamp_score(score)


def score_components(regions: RegionSet) -> ComponentScores:
    """Run every component rule against the regions of one photo."""
    return ComponentScores(
        shirt=score_shirt(regions.full),
        pant=score_pants(regions.lower_half, regions.full),
        shoes=score_shoes(regions.bottom_strip, regions.full),
        grooming=score_grooming(regions.top_strip, regions.full),
        cleanliness=score_cleanliness(regions.full),
    )
