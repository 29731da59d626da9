"""
Unit tests for the grading engine and image decoding
"""
import asyncio

import numpy as np
import pytest

from uniform_grader.core import Component, LetterGrade, Messages
from uniform_grader.grader import (
    GradingEngine,
    ImageBuffer,
    decode_image,
    default_result,
    limit_dimensions,
)

from conftest import encode_png, solid_image


class TestImageBuffer:
    """Test cases for ImageBuffer and decoding"""

    def test_from_rgba_bytes(self):
        data = bytes([10, 20, 30, 255] * 6)
        image = ImageBuffer.from_rgba_bytes(3, 2, data)
        assert (image.width, image.height) == (3, 2)
        assert image.pixels[1, 2].tolist() == [10, 20, 30, 255]

    def test_from_rgba_bytes_wrong_length(self):
        with pytest.raises(ValueError):
            ImageBuffer.from_rgba_bytes(3, 2, bytes(10))

    def test_rejects_non_rgba_arrays(self):
        with pytest.raises(ValueError):
            ImageBuffer(np.zeros((2, 2, 3), dtype=np.uint8))
        with pytest.raises(ValueError):
            ImageBuffer(np.zeros((2, 2, 4), dtype=np.float32))

    def test_pixels_are_read_only(self, white_image):
        with pytest.raises(ValueError):
            white_image.pixels[0, 0, 0] = 1

    def test_decode_png(self):
        original = solid_image((200, 30, 90), height=8, width=6)
        decoded = decode_image(encode_png(original))

        assert decoded is not None
        assert (decoded.width, decoded.height) == (6, 8)
        assert decoded.pixels[0, 0].tolist() == [200, 30, 90, 255]

    @pytest.mark.parametrize("data", [b"", b"not an image", bytes(64)])
    def test_decode_garbage(self, data):
        assert decode_image(data) is None

    def test_limit_dimensions(self):
        image = solid_image(100, height=50, width=100)
        limited = limit_dimensions(image, 40)
        assert (limited.width, limited.height) == (40, 20)
        assert limit_dimensions(image, 100) is image


class TestDefaultResult:
    """The fallback used for unreadable photos"""

    def test_default_result(self):
        result = default_result()

        assert result.final_score == 50
        assert result.final_grade == LetterGrade.D
        assert result.is_fallback
        assert result.breakdown.to_dict() == {c.value: 50 for c in Component}
        assert result.feedback == {c.value: Messages.CLEARER_PHOTO for c in Component}


class TestGradingEngine:
    """Test cases for GradingEngine"""

    def test_all_white(self, white_image):
        result = GradingEngine().grade(white_image)

        assert result.breakdown.shirt == 90
        assert "excellent" in result.feedback["shirt"]
        assert result.final_score == 77
        assert result.final_grade == LetterGrade.B
        assert not result.is_fallback

    def test_all_black(self, black_image):
        result = GradingEngine().grade(black_image)

        assert result.breakdown.shirt == 45
        assert "needs improvement" in result.feedback["shirt"]
        assert result.final_score == 50
        assert result.final_grade == LetterGrade.D

    def test_mid_gray(self, gray_image):
        result = GradingEngine().grade(gray_image)

        assert result.breakdown.cleanliness == 75
        assert result.final_score == 88
        assert result.final_grade == LetterGrade.A

    def test_encoded_bytes_match_buffer(self, white_image):
        engine = GradingEngine()
        assert engine.grade(encode_png(white_image)) == engine.grade(white_image)

    def test_idempotent(self):
        rng = np.random.default_rng(3)
        image = ImageBuffer(rng.integers(0, 256, size=(30, 20, 4), dtype=np.uint8))
        engine = GradingEngine()

        first = engine.grade(image)
        second = engine.grade(image)
        assert first == second
        assert first.to_dict() == second.to_dict()

    @pytest.mark.parametrize("data", [b"", b"\x89PNG broken", bytearray(b"garbage")])
    def test_decode_failure_returns_default(self, data):
        result = GradingEngine().grade(data)
        assert result == default_result()
        assert len(set(result.feedback.values())) == 1

    def test_zero_height_image_is_scored(self):
        """Degenerate images are scored from zero stats, not rejected"""
        image = ImageBuffer(np.zeros((0, 5, 4), dtype=np.uint8))
        result = GradingEngine().grade(image)

        assert not result.is_fallback
        assert result.breakdown.to_dict() == {
            "shirt": 65, "pant": 75, "shoes": 35, "grooming": 80, "cleanliness": 50
        }

    def test_large_image_is_downscaled(self):
        engine = GradingEngine(max_dimension=16)
        large = solid_image(255, height=400, width=300)
        assert engine.grade(large) == GradingEngine().grade(solid_image(255))

    def test_feedback_matches_breakdown_keys(self, gray_image):
        result = GradingEngine().grade(gray_image)
        assert set(result.feedback) == set(result.breakdown.to_dict())
        assert all(result.feedback.values())

    def test_to_dict(self, white_image):
        data = GradingEngine().grade(white_image).to_dict()
        assert data["final_grade"] == "B"
        assert data["breakdown"]["pant"] == 75
        assert set(data["feedback"]) == {c.value for c in Component}

    def test_grade_async(self, white_image):
        engine = GradingEngine()
        result = asyncio.run(engine.grade_async(white_image))
        assert result == engine.grade(white_image)

    def test_concurrent_async_grading(self, white_image, black_image):
        engine = GradingEngine()

        async def grade_both():
            return await asyncio.gather(
                engine.grade_async(white_image),
                engine.grade_async(black_image),
                engine.grade_async(b"broken"),
            )

        white, black, broken = asyncio.run(grade_both())
        assert white.final_grade == LetterGrade.B
        assert black.final_grade == LetterGrade.D
        assert broken.is_fallback


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
