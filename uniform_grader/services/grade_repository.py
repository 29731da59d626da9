"""
Grade Repository
Stores grading results in the students / grades / grading_breakdown tables
"""
import uuid
import logging
from contextlib import closing
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from uniform_grader.config import settings
from uniform_grader.core import Component, DatabaseException, Messages, NotFoundException
from uniform_grader.grader import GradingResult

logger = logging.getLogger(__name__)

# Optional import for the SQL Server driver
try:
    import pyodbc
    PYODBC_AVAILABLE = True
except ImportError:
    pyodbc = None
    PYODBC_AVAILABLE = False


SCHEMA_STATEMENTS = [
    """
    CREATE TABLE students (
        id VARCHAR(36) PRIMARY KEY,
        full_name VARCHAR(255) NOT NULL,
        class_name VARCHAR(10) NOT NULL,
        section VARCHAR(5),
        roll_number VARCHAR(10) NOT NULL UNIQUE,
        created_at VARCHAR(40) NOT NULL
    )
    """,
    """
    CREATE TABLE grades (
        id VARCHAR(36) PRIMARY KEY,
        student_id VARCHAR(36) NOT NULL REFERENCES students(id),
        final_grade VARCHAR(1) NOT NULL,
        final_score NUMERIC(5, 2) NOT NULL CHECK (final_score >= 0 AND final_score <= 100),
        photo_url VARCHAR(1000) NOT NULL,
        graded_at VARCHAR(40) NOT NULL,
        feedback_text VARCHAR(1000)
    )
    """,
    """
    CREATE TABLE grading_breakdown (
        id VARCHAR(36) PRIMARY KEY,
        grade_id VARCHAR(36) NOT NULL UNIQUE REFERENCES grades(id),
        shirt_score NUMERIC(5, 2) NOT NULL CHECK (shirt_score >= 0 AND shirt_score <= 100),
        pant_score NUMERIC(5, 2) NOT NULL CHECK (pant_score >= 0 AND pant_score <= 100),
        shoes_score NUMERIC(5, 2) NOT NULL CHECK (shoes_score >= 0 AND shoes_score <= 100),
        grooming_score NUMERIC(5, 2) NOT NULL CHECK (grooming_score >= 0 AND grooming_score <= 100),
        cleanliness_score NUMERIC(5, 2) NOT NULL CHECK (cleanliness_score >= 0 AND cleanliness_score <= 100),
        shirt_feedback VARCHAR(500),
        pant_feedback VARCHAR(500),
        shoes_feedback VARCHAR(500),
        grooming_feedback VARCHAR(500),
        cleanliness_feedback VARCHAR(500)
    )
    """,
]

SCORE_COLUMNS = [f"{c.value}_score" for c in Component]
FEEDBACK_COLUMNS = [f"{c.value}_feedback" for c in Component]


@dataclass
class GradeRecord:
    """A persisted grade with its breakdown"""
    id: str
    student_id: str
    final_score: float
    final_grade: str
    photo_url: str
    graded_at: str
    breakdown: Dict[str, float] = field(default_factory=dict)
    feedback: Dict[str, str] = field(default_factory=dict)
    full_name: Optional[str] = None
    class_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "full_name": self.full_name,
            "class_name": self.class_name,
            "final_score": self.final_score,
            "final_grade": self.final_grade,
            "photo_url": self.photo_url,
            "graded_at": self.graded_at,
            "breakdown": dict(self.breakdown),
            "feedback": dict(self.feedback),
        }


def default_connection_factory():
    """Open a SQL Server connection with the configured connection string"""
    if not PYODBC_AVAILABLE:
        raise DatabaseException("connect", Messages.DATABASE_DRIVER_MISSING)
    return pyodbc.connect(settings.DATABASE_CONN_STR)


class GradeRepository:
    """
    Data access for grades.

    Works with any DB-API 2.0 connection using "?" placeholders
    (pyodbc in production, sqlite3 in tests).
    """

    GRADE_SELECT = (
        "SELECT g.id, g.student_id, g.final_score, g.final_grade, g.photo_url, g.graded_at, "
        + ", ".join(f"b.{col}" for col in SCORE_COLUMNS + FEEDBACK_COLUMNS)
        + ", s.full_name, s.class_name"
        + " FROM grades g"
        + " JOIN students s ON s.id = g.student_id"
        + " LEFT JOIN grading_breakdown b ON b.grade_id = g.id"
    )

    def __init__(self, connection_factory: Callable[[], Any] = None):
        self.connection_factory = connection_factory or default_connection_factory

    def _connect(self):
        try:
            return self.connection_factory()
        except DatabaseException:
            raise
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            raise DatabaseException("connect", str(e))

    def create_schema(self) -> None:
        """Create the students, grades and grading_breakdown tables"""
        with closing(self._connect()) as conn:
            cursor = conn.cursor()
            for statement in SCHEMA_STATEMENTS:
                cursor.execute(statement)
            conn.commit()
        logger.info("Database schema created")

    def add_student(
        self,
        full_name: str,
        class_name: str,
        roll_number: str,
        section: Optional[str] = None
    ) -> str:
        """Insert a student and return its id"""
        student_id = str(uuid.uuid4())
        created_at = datetime.now(timezone.utc).isoformat()

        with closing(self._connect()) as conn:
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO students (id, full_name, class_name, section, roll_number, created_at)"
                    " VALUES (?, ?, ?, ?, ?, ?)",
                    (student_id, full_name, class_name, section, roll_number, created_at)
                )
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to insert student {roll_number}: {e}")
                raise DatabaseException("insert student", str(e))

        return student_id

    def get_student(self, student_id: str) -> Dict[str, Any]:
        """
        Get a student by id.

        Raises:
            NotFoundException: If the student does not exist
        """
        with closing(self._connect()) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT id, full_name, class_name, section, roll_number"
                " FROM students WHERE id = ?",
                (student_id,)
            )
            row = cursor.fetchone()

        if row is None:
            raise NotFoundException("Student", student_id)

        return {
            "id": row[0],
            "full_name": row[1],
            "class_name": row[2],
            "section": row[3],
            "roll_number": row[4],
        }

    def save_grading_result(
        self,
        student_id: str,
        result: GradingResult,
        photo_url: str
    ) -> GradeRecord:
        """
        Persist a grading result as a grade row plus its breakdown row.

        Both inserts run in one transaction.

        Args:
            student_id: Owner of the grade
            result: Engine output
            photo_url: URL of the stored photo

        Returns:
            The stored GradeRecord

        Raises:
            NotFoundException: If the student does not exist
            DatabaseException: If an insert fails
        """
        student = self.get_student(student_id)

        grade_id = str(uuid.uuid4())
        graded_at = datetime.now(timezone.utc).isoformat()
        breakdown = result.breakdown.to_dict()

        with closing(self._connect()) as conn:
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO grades (id, student_id, final_grade, final_score, photo_url, graded_at, feedback_text)"
                    " VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (grade_id, student_id, result.final_grade.value, result.final_score,
                     photo_url, graded_at, "")
                )

                columns = ["id", "grade_id"] + SCORE_COLUMNS + FEEDBACK_COLUMNS
                values = (
                    [str(uuid.uuid4()), grade_id]
                    + [breakdown[c.value] for c in Component]
                    + [result.feedback.get(c.value, "") for c in Component]
                )
                placeholders = ", ".join("?" for _ in columns)
                cursor.execute(
                    f"INSERT INTO grading_breakdown ({', '.join(columns)}) VALUES ({placeholders})",
                    values
                )
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to save grade for student {student_id}: {e}")
                raise DatabaseException("save grade", str(e))

        logger.info(
            f"Saved grade {grade_id} for student {student_id}: "
            f"{result.final_score} ({result.final_grade.value})"
        )

        return GradeRecord(
            id=grade_id,
            student_id=student_id,
            final_score=float(result.final_score),
            final_grade=result.final_grade.value,
            photo_url=photo_url,
            graded_at=graded_at,
            breakdown={k: float(v) for k, v in breakdown.items()},
            feedback=dict(result.feedback),
            full_name=student["full_name"],
            class_name=student["class_name"],
        )

    @staticmethod
    def _row_to_record(row) -> GradeRecord:
        n = len(SCORE_COLUMNS)
        scores = row[6:6 + n]
        feedback = row[6 + n:6 + 2 * n]
        names = [c.value for c in Component]

        return GradeRecord(
            id=row[0],
            student_id=row[1],
            final_score=float(row[2]),
            final_grade=row[3],
            photo_url=row[4],
            graded_at=row[5],
            breakdown={
                name: float(score) for name, score in zip(names, scores) if score is not None
            },
            feedback={
                name: text for name, text in zip(names, feedback) if text is not None
            },
            full_name=row[6 + 2 * n],
            class_name=row[7 + 2 * n],
        )

    def _query(self, sql: str, params: tuple = ()) -> List[GradeRecord]:
        with closing(self._connect()) as conn:
            cursor = conn.cursor()
            cursor.execute(sql, params)
            rows = cursor.fetchall()
        return [self._row_to_record(r) for r in rows]

    def get_student_grades(self, student_id: str) -> List[GradeRecord]:
        """All grades of a student, newest first"""
        return self._query(
            self.GRADE_SELECT + " WHERE g.student_id = ? ORDER BY g.graded_at DESC",
            (student_id,)
        )

    def get_grade(self, grade_id: str) -> GradeRecord:
        """
        Get one grade with its breakdown.

        Raises:
            NotFoundException: If the grade does not exist
        """
        records = self._query(self.GRADE_SELECT + " WHERE g.id = ?", (grade_id,))
        if not records:
            raise NotFoundException("Grade", grade_id)
        return records[0]

    def list_grades(self, class_name: Optional[str] = None) -> List[GradeRecord]:
        """All grades, optionally restricted to one class, best score first"""
        if class_name:
            return self._query(
                self.GRADE_SELECT + " WHERE s.class_name = ? ORDER BY g.final_score DESC",
                (class_name,)
            )
        return self._query(self.GRADE_SELECT + " ORDER BY g.final_score DESC")
