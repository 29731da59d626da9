"""
Image Processing Module
Decodes uploaded photos into RGBA pixel buffers
"""
import cv2
import numpy as np
from dataclasses import dataclass
from typing import Optional, Union
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageBuffer:
    """
    Decoded raster: (H, W, 4) uint8 array in RGBA order, row-major.
    The array is made read-only on construction.
    """
    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(
                f"Expected an (H, W, 4) RGBA array, got shape {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")
        self.pixels.flags.writeable = False

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @classmethod
    def from_rgba_bytes(
        cls,
        width: int,
        height: int,
        data: Union[bytes, bytearray, memoryview]
    ) -> "ImageBuffer":
        """
        Build a buffer from a flat RGBA byte sequence (4 bytes per pixel).

        Raises:
            ValueError: If the data length does not match width * height * 4
        """
        expected = width * height * 4
        if len(data) != expected:
            raise ValueError(
                f"RGBA data has {len(data)} bytes, expected {expected} for {width}x{height}"
            )
        arr = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4)
        return cls(arr.copy())

    @classmethod
    def from_rgb(cls, rgb: np.ndarray) -> "ImageBuffer":
        """Wrap an (H, W, 3) RGB array, adding an opaque alpha channel."""
        alpha = np.full(rgb.shape[:2] + (1,), 255, dtype=np.uint8)
        return cls(np.concatenate([rgb.astype(np.uint8), alpha], axis=2))


def decode_image(data: bytes) -> Optional[ImageBuffer]:
    """
    Decode encoded image bytes (JPEG, PNG, ...) into an RGBA buffer.

    Args:
        data: Raw file content

    Returns:
        ImageBuffer or None if the bytes are not a readable image
    """
    if not data:
        logger.warning("Cannot decode empty image data")
        return None

    raw = np.frombuffer(data, dtype=np.uint8)
    try:
        # IMREAD_COLOR always yields 8-bit BGR, whatever the source format
        img = cv2.imdecode(raw, cv2.IMREAD_COLOR)
    except cv2.error as e:
        logger.warning(f"OpenCV could not decode image: {e}")
        return None

    if img is None:
        logger.warning(f"Failed to decode image ({len(data)} bytes)")
        return None

    return ImageBuffer(cv2.cvtColor(img, cv2.COLOR_BGR2RGBA))


def limit_dimensions(image: ImageBuffer, max_dimension: int) -> ImageBuffer:
    """
    Downscale an image so its larger side is at most max_dimension.

    Args:
        image: Decoded image
        max_dimension: Largest allowed width or height

    Returns:
        The same buffer if already small enough, otherwise a resized copy
    """
    longest = max(image.width, image.height)
    if max_dimension <= 0 or longest <= max_dimension:
        return image

    scale = max_dimension / longest
    new_size = (max(1, int(image.width * scale)), max(1, int(image.height * scale)))
    resized = cv2.resize(image.pixels.copy(), new_size, interpolation=cv2.INTER_AREA)

    logger.info(
        f"Downscaled image from {image.width}x{image.height} "
        f"to {new_size[0]}x{new_size[1]}"
    )
    return ImageBuffer(resized)
