"""
Progress sinks - Where completed-lesson results are persisted.

Provides:
- ProgressSink protocol consumed by ProgressTracker
- SqliteProgressStore: local store in ~/.lessondeck/progress.db
- HttpProgressSink: POST to the course API progress endpoint
- BackgroundSubmitter: single-worker executor for fire-and-forget submits
"""

import logging
import sqlite3
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Protocol
from urllib.parse import quote

from lessondeck.config import DEFAULT_PROGRESS_DB
from lessondeck.schemas import LessonStatus, ProgressSubmission
from lessondeck.utils import ApiClient, ApiError


logger = logging.getLogger(__name__)


class ProgressSubmissionError(Exception):
    """A sink could not persist a submission."""


class ProgressSink(Protocol):
    def submit_progress(self, submission: ProgressSubmission) -> None:
        """Persist one result. Raises on failure."""
        ...


class BackgroundSubmitter(ThreadPoolExecutor):
    """Executor running one submission at a time, off the UI thread."""

    def __init__(self):
        super().__init__(max_workers=1, thread_name_prefix="progress-submit")


class SqliteProgressStore:
    """
    Store lesson results in a SQLite database.

    Progress lives apart from course content so that:
    - Courses can be regenerated without losing progress
    - Each (course, lesson) keeps its latest score and attempt count
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize progress store.

        Args:
            db_path: Path to progress.db (default: ~/.lessondeck/progress.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_PROGRESS_DB
        self._ensure_database()

    def _ensure_database(self):
        """Create database and tables if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS lesson_progress (
                    course_id TEXT NOT NULL,
                    lesson_id TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'not_started',
                    completed_at TEXT,
                    quiz_score INTEGER,
                    attempts INTEGER NOT NULL DEFAULT 0,
                    PRIMARY KEY (course_id, lesson_id)
                );

                CREATE INDEX IF NOT EXISTS idx_lesson_progress_course
                ON lesson_progress(course_id);
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def submit_progress(self, submission: ProgressSubmission) -> None:
        """Upsert a completed lesson. A missing score keeps the stored one."""
        conn = self._get_connection()
        try:
            completed_at = submission.submitted_at.isoformat()
            conn.execute(
                """INSERT INTO lesson_progress
                     (course_id, lesson_id, status, completed_at, quiz_score, attempts)
                   VALUES (?, ?, ?, ?, ?, 1)
                   ON CONFLICT(course_id, lesson_id) DO UPDATE SET
                     status = 'completed',
                     completed_at = ?,
                     quiz_score = COALESCE(?, quiz_score),
                     attempts = attempts + 1""",
                (
                    submission.course_id, submission.lesson_id,
                    LessonStatus.COMPLETED.value, completed_at, submission.quiz_score,
                    completed_at, submission.quiz_score,
                )
            )
            conn.commit()
        except sqlite3.Error as e:
            raise ProgressSubmissionError(f"Could not store progress: {e}") from e
        finally:
            conn.close()
        logger.info(f"Progress saved for course {submission.course_id}, lesson {submission.lesson_id}")

    def get_completed_lesson_ids(self, course_id: str) -> set[str]:
        """Get set of completed lesson IDs for a course."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT lesson_id FROM lesson_progress
                   WHERE course_id = ? AND status = 'completed'""",
                (course_id,)
            )
            return {row["lesson_id"] for row in cursor.fetchall()}
        finally:
            conn.close()

    def reset_course(self, course_id: str):
        """Delete all stored progress for a course."""
        conn = self._get_connection()
        try:
            conn.execute(
                "DELETE FROM lesson_progress WHERE course_id = ?",
                (course_id,)
            )
            conn.commit()
        finally:
            conn.close()


class HttpProgressSink:
    """Send results to POST {base}/courses/{course_id}/progress."""

    def __init__(self, client: ApiClient):
        self.client = client

    def submit_progress(self, submission: ProgressSubmission) -> None:
        path = f"/courses/{quote(submission.course_id, safe='')}/progress"
        try:
            self.client.post_json(path, submission.to_payload())
        except ApiError as e:
            raise ProgressSubmissionError(str(e)) from e
