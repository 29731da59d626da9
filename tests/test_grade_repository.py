"""
Unit tests for grade persistence and photo storage
"""
import pytest

from uniform_grader.core import BadRequestException, DatabaseException, NotFoundException
from uniform_grader.grader import default_result
from uniform_grader.services import GradeRepository

from conftest import make_result


class TestStudents:
    """Test cases for student lookup"""

    def test_get_student(self, repository, student_id):
        student = repository.get_student(student_id)
        assert student["full_name"] == "Asha Verma"
        assert student["class_name"] == "10"
        assert student["roll_number"] == "R-001"

    def test_unknown_student(self, repository):
        with pytest.raises(NotFoundException):
            repository.get_student("missing")

    def test_duplicate_roll_number(self, repository, student_id):
        with pytest.raises(DatabaseException):
            repository.add_student("Someone Else", "10", "R-001")


class TestSaveGradingResult:
    """Test cases for save_grading_result"""

    def test_saves_grade_and_breakdown(self, repository, student_id):
        result = make_result(88)
        record = repository.save_grading_result(student_id, result, "/static/uploads/p.jpg")

        assert record.final_score == 88
        assert record.final_grade == "A"
        assert record.full_name == "Asha Verma"

        stored = repository.get_grade(record.id)
        assert stored.student_id == student_id
        assert stored.photo_url == "/static/uploads/p.jpg"
        assert stored.breakdown == {k: float(v) for k, v in result.breakdown.to_dict().items()}
        assert stored.feedback == result.feedback
        assert stored.class_name == "10"

    def test_fallback_result_is_persisted(self, repository, student_id):
        record = repository.save_grading_result(student_id, default_result(), "/x.png")
        stored = repository.get_grade(record.id)
        assert stored.final_grade == "D"
        assert set(stored.breakdown.values()) == {50.0}

    def test_unknown_student_is_rejected(self, repository):
        with pytest.raises(NotFoundException):
            repository.save_grading_result("missing", make_result(70), "/x.png")
        assert repository.list_grades() == []

    def test_failed_breakdown_rolls_back_grade(self, repository, student_id, monkeypatch):
        """A failing breakdown insert leaves no orphan grade row"""
        monkeypatch.setattr(
            "uniform_grader.services.grade_repository.FEEDBACK_COLUMNS",
            ["shirt_feedback", "no_such_column", "shoes_feedback",
             "grooming_feedback", "cleanliness_feedback"]
        )
        with pytest.raises(DatabaseException):
            repository.save_grading_result(student_id, make_result(70), "/x.png")

        monkeypatch.undo()
        assert repository.get_student_grades(student_id) == []

    def test_unknown_grade(self, repository):
        with pytest.raises(NotFoundException):
            repository.get_grade("missing")


class TestQueries:
    """Test cases for grade queries"""

    def test_student_grades_newest_first(self, repository, student_id):
        first = repository.save_grading_result(student_id, make_result(60), "/a.png")
        second = repository.save_grading_result(student_id, make_result(90), "/b.png")

        grades = repository.get_student_grades(student_id)
        assert [g.id for g in grades] == [second.id, first.id]

    def test_list_grades_by_class(self, repository, student_id):
        other = repository.add_student("Ben Ito", "9", "R-002")
        repository.save_grading_result(student_id, make_result(60), "/a.png")
        repository.save_grading_result(other, make_result(95), "/b.png")

        assert [g.final_score for g in repository.list_grades()] == [95, 60]
        assert [g.student_id for g in repository.list_grades("9")] == [other]

    def test_connection_failure(self):
        def broken():
            raise RuntimeError("server unreachable")

        with pytest.raises(DatabaseException):
            GradeRepository(broken).get_student("any")


class TestPhotoStorage:
    """Test cases for PhotoStorage"""

    def test_save_returns_url(self, storage):
        url = storage.save("my uniform.PNG", b"data", owner="student-1")

        assert url.startswith("/static/uploads/student-1_")
        assert url.endswith(".png")
        assert storage.path_for(url).read_bytes() == b"data"

    def test_save_requires_filename(self, storage):
        with pytest.raises(BadRequestException):
            storage.save("", b"data")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
