"""
Pixel Statistics Module
Aggregate color and brightness statistics over image regions
"""
import numpy as np
from dataclasses import dataclass
from typing import Dict

from ..core.constants import PixelThresholds
from ..utils.helpers import round_half_up


@dataclass(frozen=True)
class RegionStats:
    """
    Color and brightness statistics of a pixel region.

    Values are kept unrounded; threshold checks compare the raw floats.
    """
    avg_red: float = 0.0
    avg_green: float = 0.0
    avg_blue: float = 0.0
    avg_brightness: float = 0.0
    dark_pixel_ratio: float = 0.0
    white_pixel_ratio: float = 0.0
    pixel_count: int = 0

    @property
    def color_variation(self) -> float:
        """|R - G| + |G - B| of the channel averages"""
        return abs(self.avg_red - self.avg_green) + abs(self.avg_green - self.avg_blue)

    def to_dict(self) -> Dict:
        """Convert to dictionary, averages rounded for reporting"""
        return {
            "avg_red": round_half_up(self.avg_red),
            "avg_green": round_half_up(self.avg_green),
            "avg_blue": round_half_up(self.avg_blue),
            "avg_brightness": round_half_up(self.avg_brightness),
            "dark_pixel_ratio": self.dark_pixel_ratio,
            "white_pixel_ratio": self.white_pixel_ratio,
            "pixel_count": self.pixel_count,
        }


def compute_region_stats(
    pixels: np.ndarray,
    dark_threshold: float = PixelThresholds.DARK,
    white_threshold: float = PixelThresholds.WHITE
) -> RegionStats:
    """
    Compute statistics for a block of pixels.

    Brightness is the plain channel mean (R + G + B) / 3, not luma.

    Args:
        pixels: (H, W, C) uint8 array with R, G, B as the first channels
        dark_threshold: Pixels with brightness below this count as dark
        white_threshold: Pixels with brightness above this count as white

    Returns:
        RegionStats; all zeros for an empty region
    """
    rgb = pixels[..., :3].reshape(-1, 3).astype(np.float64)
    count = rgb.shape[0]
    if count == 0:
        return RegionStats()

    channel_means = rgb.mean(axis=0)
    brightness = rgb.sum(axis=1) / 3

    return RegionStats(
        avg_red=float(channel_means[0]),
        avg_green=float(channel_means[1]),
        avg_blue=float(channel_means[2]),
        avg_brightness=float(brightness.mean()),
        dark_pixel_ratio=float(np.count_nonzero(brightness < dark_threshold)) / count,
        white_pixel_ratio=float(np.count_nonzero(brightness > white_threshold)) / count,
        pixel_count=count,
    )
