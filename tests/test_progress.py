"""Tests for session progress tracking and sink forwarding."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from lessondeck.classroom import ProgressTracker


class TestCompletion:

    def test_initial_state(self, two_lesson_course):
        tracker = ProgressTracker(two_lesson_course)
        assert tracker.completion_percentage() == 0.0
        assert tracker.get_completed_lesson_indices() == frozenset()
        assert not tracker.is_course_finished()

    def test_mark_complete(self, two_lesson_course, sink):
        tracker = ProgressTracker(two_lesson_course, sink=sink)
        future = tracker.mark_lesson_complete(0, 1)
        assert future.result() is None
        assert tracker.is_lesson_completed(0)
        assert tracker.get_score(0) == 1
        assert tracker.completion_percentage() == 0.5

    def test_idempotent_but_resubmits(self, two_lesson_course, sink):
        tracker = ProgressTracker(two_lesson_course, sink=sink)
        tracker.mark_lesson_complete(0, 1)
        tracker.mark_lesson_complete(0, 2)
        assert tracker.completion_percentage() == 0.5
        assert tracker.get_score(0) == 2
        assert [s.quiz_score for s in sink.submissions] == [1, 2]
        assert {s.lesson_id for s in sink.submissions} == {"lesson-1"}
        assert sink.submissions[0].course_id == "course-py"

    def test_all_lessons_complete(self, two_lesson_course):
        tracker = ProgressTracker(two_lesson_course)
        percentages = []
        for index in (0, 0, 1, 1):
            tracker.mark_lesson_complete(index)
            percentages.append(tracker.completion_percentage())
        assert percentages == sorted(percentages)
        assert tracker.completion_percentage() == 1
        assert tracker.is_course_finished()

    def test_out_of_range_index_ignored(self, two_lesson_course, sink):
        tracker = ProgressTracker(two_lesson_course, sink=sink)
        assert tracker.mark_lesson_complete(7, 1) is None
        assert tracker.completion_percentage() == 0.0
        assert sink.submissions == []

    def test_empty_course(self, empty_course):
        tracker = ProgressTracker(empty_course)
        assert tracker.completion_percentage() == 0
        assert not tracker.is_course_finished()

    def test_no_sink_commits_locally(self, two_lesson_course):
        tracker = ProgressTracker(two_lesson_course)
        assert tracker.mark_lesson_complete(1) is None
        assert tracker.is_lesson_completed(1)

    def test_completion_stats(self, two_lesson_course):
        tracker = ProgressTracker(two_lesson_course)
        tracker.mark_lesson_complete(0)
        assert tracker.get_completion_stats() == {
            "total_lessons": 2,
            "completed": 1,
            "not_started": 1,
            "completion_percent": 50.0,
        }


class TestSubmissionFailure:

    def test_failure_keeps_local_state(self, two_lesson_course, failing_sink):
        tracker = ProgressTracker(two_lesson_course, sink=failing_sink)
        future = tracker.mark_lesson_complete(0, 2)
        with pytest.raises(ConnectionError):
            future.result()
        assert tracker.is_lesson_completed(0)
        assert tracker.completion_percentage() == 0.5

    def test_failure_produces_notice(self, two_lesson_course, failing_sink):
        tracker = ProgressTracker(two_lesson_course, sink=failing_sink)
        tracker.mark_lesson_complete(0, 2)
        notices = tracker.pop_notices()
        assert len(notices) == 1
        assert notices[0].lesson_id == "lesson-1"
        assert "unreachable" in notices[0].message
        assert tracker.pop_notices() == []

    def test_no_retry(self, two_lesson_course, failing_sink):
        tracker = ProgressTracker(two_lesson_course, sink=failing_sink)
        tracker.mark_lesson_complete(0, 2)
        assert failing_sink.calls == 1


class TestBackgroundSubmission:

    def test_executor_submission(self, two_lesson_course, sink):
        with ThreadPoolExecutor(max_workers=1) as executor:
            tracker = ProgressTracker(two_lesson_course, sink=sink, executor=executor)
            future = tracker.mark_lesson_complete(0, 1)
            assert tracker.is_lesson_completed(0)
            future.result(timeout=5)
        assert len(sink.submissions) == 1

    def test_executor_failure_notice(self, two_lesson_course, failing_sink):
        with ThreadPoolExecutor(max_workers=1) as executor:
            tracker = ProgressTracker(two_lesson_course, sink=failing_sink, executor=executor)
            tracker.mark_lesson_complete(0, 1)
        # Executor shutdown waits for the submission and its callback
        assert len(tracker.pop_notices()) == 1
