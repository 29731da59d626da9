"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


# ===== Grading Schemas =====
class ComponentBreakdown(BaseModel):
    shirt: float = Field(..., ge=0, le=100)
    pant: float = Field(..., ge=0, le=100)
    shoes: float = Field(..., ge=0, le=100)
    grooming: float = Field(..., ge=0, le=100)
    cleanliness: float = Field(..., ge=0, le=100)


class ComponentFeedback(BaseModel):
    shirt: str = ""
    pant: str = ""
    shoes: str = ""
    grooming: str = ""
    cleanliness: str = ""


class GradingResultResponse(BaseModel):
    success: bool = True
    final_score: int = Field(..., ge=0, le=100)
    final_grade: str
    breakdown: ComponentBreakdown
    feedback: ComponentFeedback
    is_fallback: bool = False


class GradeRecordResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    id: str
    student_id: str
    full_name: Optional[str] = None
    class_name: Optional[str] = None
    final_score: float
    final_grade: str
    photo_url: str
    graded_at: str
    breakdown: ComponentBreakdown
    feedback: ComponentFeedback


class GradeHistoryResponse(BaseModel):
    student_id: str
    grades: List[GradeRecordResponse] = []
    total: int = 0


# ===== Statistics Schemas =====
class GradeStatisticsResponse(BaseModel):
    class_name: Optional[str] = None
    total_grades: int
    average_score: int
    max_score: float
    min_score: float
    grade_distribution: Dict[str, int]
    component_averages: Dict[str, int]


class ExportResponse(BaseModel):
    success: bool
    excel_file: str
    file_url: str
