"""
Grading Service
Grades uploaded uniform photos, stores them and reports on results
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font

from uniform_grader.config import settings
from uniform_grader.core import BadRequestException, Component, FileLimits, LetterGrade, Messages
from uniform_grader.grader import GradingEngine, GradingResult, score_to_grade
from uniform_grader.utils import (
    ensure_directory,
    format_file_size,
    is_valid_image,
    round_half_up,
    safe_filename,
)

from .grade_repository import GradeRecord, GradeRepository
from .photo_storage import PhotoStorage

logger = logging.getLogger(__name__)


class UniformGradingService:
    """Service for uniform grading and result management"""

    def __init__(
        self,
        engine: Optional[GradingEngine] = None,
        repository: Optional[GradeRepository] = None,
        storage: Optional[PhotoStorage] = None
    ):
        self.engine = engine or GradingEngine(max_dimension=settings.MAX_IMAGE_DIMENSION)
        self.repository = repository or GradeRepository()
        self.storage = storage or PhotoStorage()
        self.exports_dir = ensure_directory(settings.EXPORTS_DIR)

    @staticmethod
    def validate_upload(filename: Optional[str], content: bytes) -> None:
        """Reject uploads that are not images or are too large"""
        if not filename:
            raise BadRequestException(Messages.FILENAME_REQUIRED)

        if not is_valid_image(filename):
            raise BadRequestException(f"{Messages.INVALID_FILE_TYPE}: {filename}")

        if len(content) > FileLimits.MAX_IMAGE_SIZE:
            raise BadRequestException(
                f"{Messages.FILE_TOO_LARGE} "
                f"({format_file_size(len(content))} > {format_file_size(FileLimits.MAX_IMAGE_SIZE)})"
            )

    async def preview(self, filename: Optional[str], content: bytes) -> GradingResult:
        """Grade a photo without storing anything"""
        self.validate_upload(filename, content)
        return await self.engine.grade_async(content)

    async def grade_photo(
        self,
        student_id: str,
        filename: Optional[str],
        content: bytes
    ) -> GradeRecord:
        """
        Grade a student's uniform photo and persist the result.

        Args:
            student_id: Student the photo belongs to
            filename: Original file name
            content: Encoded image bytes

        Returns:
            The stored GradeRecord
        """
        self.validate_upload(filename, content)

        # Fail early for unknown students, before storing the photo
        self.repository.get_student(student_id)

        result = await self.engine.grade_async(content)
        if result.is_fallback:
            logger.warning(f"Photo {filename} for student {student_id} could not be analysed")

        photo_url = self.storage.save(filename, content, owner=student_id)
        try:
            return self.repository.save_grading_result(student_id, result, photo_url)
        except Exception:
            # No grade row points at the photo, so drop it
            self.storage.path_for(photo_url).unlink(missing_ok=True)
            logger.warning(f"Removed photo {photo_url} after failed save")
            raise

    def get_student_grades(self, student_id: str) -> List[GradeRecord]:
        """Grade history of one student, newest first"""
        self.repository.get_student(student_id)
        return self.repository.get_student_grades(student_id)

    def get_grade(self, grade_id: str) -> GradeRecord:
        return self.repository.get_grade(grade_id)

    def get_statistics(self, class_name: Optional[str] = None) -> Dict[str, Any]:
        """
        Summary statistics over stored grades.

        Letter grades are re-derived from the stored scores with the
        same cutoffs the engine uses.
        """
        records = self.repository.list_grades(class_name)
        scores = [r.final_score for r in records]

        distribution = {grade.value: 0 for grade in LetterGrade}
        for score in scores:
            distribution[score_to_grade(score).value] += 1

        component_averages = {
            c.value: (
                round_half_up(sum(r.breakdown.get(c.value, 0) for r in records) / len(records))
                if records else 0
            )
            for c in Component
        }

        return {
            "class_name": class_name,
            "total_grades": len(scores),
            "average_score": round_half_up(sum(scores) / len(scores)) if scores else 0,
            "max_score": max(scores) if scores else 0,
            "min_score": min(scores) if scores else 0,
            "grade_distribution": distribution,
            "component_averages": component_averages,
        }

    def export_statistics_to_excel(self, class_name: Optional[str] = None) -> str:
        """Export statistics and all grades to an Excel file"""
        summary = self.get_statistics(class_name)
        records = self.repository.list_grades(class_name)

        wb = Workbook()

        # Summary sheet
        ws_summary = wb.active
        ws_summary.title = "Summary"

        rows = [
            ("Class", class_name or "All"),
            ("Total Grades", summary["total_grades"]),
            ("Average Score", summary["average_score"]),
            ("Max Score", summary["max_score"]),
            ("Min Score", summary["min_score"]),
        ]
        rows += [(f"Grade {g}", n) for g, n in summary["grade_distribution"].items()]

        for label, value in rows:
            ws_summary.append([label, value])
        for row in ws_summary.iter_rows(min_col=1, max_col=1):
            row[0].font = Font(bold=True)

        # Grades sheet
        ws_grades = wb.create_sheet("Grades")
        headers = (
            ["Student", "Class", "Final Score", "Final Grade", "Graded At"]
            + [c.value.capitalize() for c in Component]
        )
        ws_grades.append(headers)

        for col in range(1, len(headers) + 1):
            ws_grades.cell(row=1, column=col).font = Font(bold=True)

        for r in records:
            ws_grades.append(
                [r.full_name, r.class_name, r.final_score, r.final_grade, r.graded_at]
                + [r.breakdown.get(c.value) for c in Component]
            )

        # Auto-adjust column width
        for col in ws_grades.columns:
            max_len = max(len(str(cell.value)) if cell.value else 0 for cell in col)
            ws_grades.column_dimensions[col[0].column_letter].width = max_len + 2

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = safe_filename(f"uniform_grades_{class_name or 'all'}_{timestamp}.xlsx")
        file_path = self.exports_dir / filename
        wb.save(file_path)

        logger.info(f"Exported to Excel: {filename}")
        return str(file_path)


# Singleton instance
grading_service = UniformGradingService()
