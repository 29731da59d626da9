"""
Region Extraction Module
Fixed rectangular sampling regions used as proxies for uniform components
"""
import math
from dataclasses import dataclass
from typing import Dict, Tuple
import logging

from ..core.constants import PixelThresholds, RegionFractions
from .image_processing import ImageBuffer
from .pixel_statistics import RegionStats, compute_region_stats

logger = logging.getLogger(__name__)


def full_image_rows(height: int) -> Tuple[int, int]:
    return 0, height


def lower_half_rows(height: int) -> Tuple[int, int]:
    return height // 2, height


def bottom_strip_rows(height: int) -> Tuple[int, int]:
    strip = math.floor(height * RegionFractions.BOTTOM_STRIP)
    return height - strip, height


def top_strip_rows(height: int) -> Tuple[int, int]:
    return 0, math.floor(height * RegionFractions.TOP_STRIP)


@dataclass(frozen=True)
class RegionSet:
    """Statistics of every sampling region of one photo"""
    full: RegionStats
    lower_half: RegionStats
    bottom_strip: RegionStats
    top_strip: RegionStats

    def to_dict(self) -> Dict:
        return {
            "full": self.full.to_dict(),
            "lower_half": self.lower_half.to_dict(),
            "bottom_strip": self.bottom_strip.to_dict(),
            "top_strip": self.top_strip.to_dict(),
        }


class RegionExtractor:
    """
    Computes RegionStats for the four fixed row bands of a photo.

    All regions span the full width. They overlap freely; full-image
    statistics are shared by several components.

    The bottom strip counts pixels below 120 as dark so that black shoes
    on a shadowed floor still register, and the top strip uses 80 so only
    hair, not skin or a collar, counts as dark. Full image and lower half
    use the common cutoff of 100.
    """

    def __init__(
        self,
        shoes_dark_threshold: float = PixelThresholds.SHOES_DARK,
        grooming_dark_threshold: float = PixelThresholds.GROOMING_DARK
    ):
        self.shoes_dark_threshold = shoes_dark_threshold
        self.grooming_dark_threshold = grooming_dark_threshold

    @staticmethod
    def _rows_stats(image: ImageBuffer, rows: Tuple[int, int], **kwargs) -> RegionStats:
        start, end = rows
        return compute_region_stats(image.pixels[start:end], **kwargs)

    def extract(self, image: ImageBuffer) -> RegionSet:
        """
        Compute statistics of all regions of an image.

        Args:
            image: Decoded image

        Returns:
            RegionSet for the image
        """
        height = image.height

        regions = RegionSet(
            full=self._rows_stats(image, full_image_rows(height)),
            lower_half=self._rows_stats(image, lower_half_rows(height)),
            bottom_strip=self._rows_stats(
                image,
                bottom_strip_rows(height),
                dark_threshold=self.shoes_dark_threshold
            ),
            top_strip=self._rows_stats(
                image,
                top_strip_rows(height),
                dark_threshold=self.grooming_dark_threshold
            ),
        )

        logger.debug(f"Extracted regions for {image.width}x{height} image")
        return regions
