# Services package
from .grade_repository import GradeRepository, GradeRecord
from .photo_storage import PhotoStorage
from .grading_service import grading_service, UniformGradingService

__all__ = [
    "GradeRepository",
    "GradeRecord",
    "PhotoStorage",
    "grading_service",
    "UniformGradingService",
]
