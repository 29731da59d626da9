"""
Shared fixtures for the uniform grader tests
"""
import sqlite3

import cv2
import numpy as np
import pytest

from uniform_grader.core import Component
from uniform_grader.grader import (
    ComponentScores,
    GradingResult,
    ImageBuffer,
    generate_feedback,
    score_to_grade,
)
from uniform_grader.services import GradeRepository, PhotoStorage


def solid_image(value, height: int = 20, width: int = 10) -> ImageBuffer:
    """Image filled with one gray level or one (R, G, B) color"""
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:] = value
    return ImageBuffer.from_rgb(rgb)


def banded_image(bands, width: int = 10) -> ImageBuffer:
    """Image stacked from (rows, value) bands, top to bottom"""
    parts = []
    for rows, value in bands:
        part = np.empty((rows, width, 3), dtype=np.uint8)
        part[:] = value
        parts.append(part)
    return ImageBuffer.from_rgb(np.concatenate(parts, axis=0))


def encode_png(image: ImageBuffer) -> bytes:
    """Lossless PNG bytes of an image"""
    bgr = cv2.cvtColor(image.pixels.copy(), cv2.COLOR_RGBA2BGR)
    ok, encoded = cv2.imencode(".png", bgr)
    assert ok
    return encoded.tobytes()


def make_result(final_score: int) -> GradingResult:
    """Result whose components all equal the final score"""
    breakdown = ComponentScores(**{c.value: final_score for c in Component})
    return GradingResult(
        final_score=final_score,
        final_grade=score_to_grade(final_score),
        breakdown=breakdown,
        feedback=generate_feedback(breakdown),
    )


@pytest.fixture
def white_image():
    return solid_image(255)


@pytest.fixture
def black_image():
    return solid_image(0)


@pytest.fixture
def gray_image():
    return solid_image(150)


@pytest.fixture
def repository(tmp_path):
    db_path = tmp_path / "grades.db"
    repo = GradeRepository(lambda: sqlite3.connect(db_path))
    repo.create_schema()
    return repo


@pytest.fixture
def student_id(repository):
    return repository.add_student("Asha Verma", "10", "R-001", section="A")


@pytest.fixture
def storage(tmp_path):
    return PhotoStorage(root=tmp_path / "photos", url_prefix="/static/uploads")
