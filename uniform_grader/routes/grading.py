"""
Grading API routes
Handles uniform photo grading, grade history and statistics
"""
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, File, UploadFile

from uniform_grader.core import Messages
from uniform_grader.schemas import (
    ExportResponse,
    GradeHistoryResponse,
    GradeRecordResponse,
    GradeStatisticsResponse,
    GradingResultResponse,
)
from uniform_grader.services import grading_service

router = APIRouter()


@router.post("/preview", response_model=GradingResultResponse)
async def preview_grade(photo: UploadFile = File(...)):
    """
    Grade a uniform photo without saving it
    """
    content = await photo.read()
    result = await grading_service.preview(photo.filename, content)
    return GradingResultResponse(**result.to_dict())


@router.post("/students/{student_id}/grade", response_model=GradeRecordResponse)
async def grade_uniform(student_id: str, photo: UploadFile = File(...)):
    """
    Grade a student's uniform photo and store the result
    """
    content = await photo.read()
    record = await grading_service.grade_photo(student_id, photo.filename, content)
    return GradeRecordResponse(message=Messages.GRADE_SAVED, **record.to_dict())


@router.get("/students/{student_id}/grades", response_model=GradeHistoryResponse)
async def get_student_grades(student_id: str):
    """
    Get a student's grade history, newest first
    """
    records = grading_service.get_student_grades(student_id)
    return GradeHistoryResponse(
        student_id=student_id,
        grades=[GradeRecordResponse(**r.to_dict()) for r in records],
        total=len(records)
    )


@router.get("/grades/{grade_id}", response_model=GradeRecordResponse)
async def get_grade(grade_id: str):
    """
    Get a single grade with its breakdown
    """
    record = grading_service.get_grade(grade_id)
    return GradeRecordResponse(**record.to_dict())


@router.get("/statistics", response_model=GradeStatisticsResponse)
async def get_statistics(class_name: Optional[str] = None):
    """
    Grade statistics, optionally for one class
    """
    return GradeStatisticsResponse(**grading_service.get_statistics(class_name))


@router.post("/statistics/export", response_model=ExportResponse)
async def export_statistics(class_name: Optional[str] = None):
    """
    Export grade statistics to Excel
    """
    excel_file = grading_service.export_statistics_to_excel(class_name)
    return ExportResponse(
        success=True,
        excel_file=Path(excel_file).name,
        file_url=f"/static/exports/{Path(excel_file).name}"
    )
