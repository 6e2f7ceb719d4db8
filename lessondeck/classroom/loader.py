"""
Course sources - Load fully populated courses before navigation starts.

Provides read-only access to:
- The course catalog (summaries only)
- A single course with all lessons and quiz questions

Sources:
- CourseFileLoader: <courses_dir>/<course_id>.json | .yaml | .yml
- HttpCourseSource: the course API (GET /courses, GET /courses/{id}/lessons)
"""

import json
import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import quote

import yaml
from pydantic import ValidationError

from lessondeck.schemas import Course, CourseSummary
from lessondeck.utils import ApiClient, ApiError


logger = logging.getLogger(__name__)

COURSE_FILE_SUFFIXES = (".json", ".yaml", ".yml")


class CourseLoadError(Exception):
    """Course data could not be read or did not match the schema."""


class CourseSource(Protocol):
    def list_courses(self) -> list[CourseSummary]:
        ...

    def load_course(self, course_id: str) -> Course:
        ...


class CourseFileLoader:
    """
    Load courses from JSON or YAML files in a directory.

    Each file holds one course object as returned by the course API.
    """

    def __init__(self, courses_dir: str | Path):
        """
        Initialize loader with the directory holding course files.

        Args:
            courses_dir: Directory of <course_id>.json/.yaml files
        """
        self.courses_dir = Path(courses_dir)

    def _find_course_file(self, course_id: str) -> Path:
        for suffix in COURSE_FILE_SUFFIXES:
            path = self.courses_dir / f"{course_id}{suffix}"
            if path.exists():
                return path
        raise CourseLoadError(f"Course not found: {course_id} (in {self.courses_dir})")

    def _read_file(self, path: Path) -> Course:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise CourseLoadError(f"Could not read {path}: {e}") from e

        try:
            return Course.model_validate(data)
        except ValidationError as e:
            raise CourseLoadError(f"Invalid course data in {path}: {e}") from e

    def list_courses(self) -> list[CourseSummary]:
        """Get summaries of all readable courses, sorted by title."""
        if not self.courses_dir.exists():
            return []

        summaries = []
        for path in sorted(self.courses_dir.iterdir()):
            if path.suffix not in COURSE_FILE_SUFFIXES:
                continue
            try:
                summaries.append(self._read_file(path).summary())
            except CourseLoadError as e:
                logger.warning(f"Skipping course file: {e}")
        return sorted(summaries, key=lambda s: s.title.lower())

    def load_course(self, course_id: str) -> Course:
        """
        Load one course with all lessons and questions.

        Raises:
            CourseLoadError: If the file is missing, unreadable or invalid
        """
        course = self._read_file(self._find_course_file(course_id))
        logger.info(f"Loaded course {course.id} ({course.lesson_count} lessons)")
        return course


class HttpCourseSource:
    """Load courses from the course API."""

    def __init__(self, client: ApiClient):
        self.client = client

    def list_courses(self) -> list[CourseSummary]:
        try:
            data = self.client.get_json("/courses")
            return [
                CourseSummary(
                    id=item["id"],
                    title=item["title"],
                    description=item.get("description") or "",
                    subject=item.get("subject"),
                    lesson_count=item.get("lesson_count") or len(item.get("lessons") or []),
                )
                for item in data or []
            ]
        except ApiError as e:
            raise CourseLoadError(f"Could not list courses: {e}") from e
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise CourseLoadError(f"Invalid course list: {e}") from e

    def load_course(self, course_id: str) -> Course:
        try:
            data = self.client.get_json(f"/courses/{quote(course_id, safe='')}/lessons")
        except ApiError as e:
            raise CourseLoadError(f"Could not load course {course_id}: {e}") from e

        try:
            course = Course.model_validate(data)
        except ValidationError as e:
            raise CourseLoadError(f"Invalid course data for {course_id}: {e}") from e
        logger.info(f"Loaded course {course.id} ({course.lesson_count} lessons)")
        return course
