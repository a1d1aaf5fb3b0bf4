"""Unit tests for the pure todo lifecycle rules."""

from datetime import date, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from core.exceptions import ErrorCode, ValidationError
from domain.entities.todo import Todo, TodoStatus
from domain.services import todo_rules


def _todo(user_id: UUID, **kwargs: object) -> Todo:
    return Todo(user_id=user_id, text="Sample Task", **kwargs)  # type: ignore[arg-type]


class TestTextAndDescription:
    def test_text_is_trimmed(self) -> None:
        assert todo_rules.validate_text("  Buy milk  ") == "Buy milk"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_text_required(self, value: str | None) -> None:
        with pytest.raises(ValidationError) as exc_info:
            todo_rules.validate_text(value)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"field": "text"}

    def test_text_at_limit_is_accepted(self) -> None:
        assert len(todo_rules.validate_text("x" * 50)) == 50

    def test_text_over_limit_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            todo_rules.validate_text("x" * 51)

    def test_blank_description_becomes_none(self) -> None:
        assert todo_rules.validate_description("   ") is None
        assert todo_rules.validate_description(None) is None

    def test_description_over_limit_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            todo_rules.validate_description("d" * 251)


class TestParseStatus:
    @pytest.mark.parametrize("value", ["IN_PROGRESS", "COMPLETED", "CANCELLED"])
    def test_accepts_known_values(self, value: str) -> None:
        assert todo_rules.parse_status(value) is TodoStatus(value)

    @pytest.mark.parametrize("value", ["DONE", "completed", "", 3])
    def test_rejects_unknown_values(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            todo_rules.parse_status(value)

        assert exc_info.value.error_code == ErrorCode.INVALID_STATUS


class TestTargetDate:
    def test_today_is_allowed(self, today: date) -> None:
        todo_rules.ensure_target_date_allowed(today, TodoStatus.IN_PROGRESS, today)

    def test_past_date_rejected_for_active_task(self, today: date) -> None:
        with pytest.raises(ValidationError) as exc_info:
            todo_rules.ensure_target_date_allowed(
                today - timedelta(days=1), TodoStatus.IN_PROGRESS, today
            )

        assert exc_info.value.error_code == ErrorCode.TARGET_DATE_IN_PAST

    @pytest.mark.parametrize("status", [TodoStatus.COMPLETED, TodoStatus.CANCELLED])
    def test_past_date_allowed_for_closed_task(self, today: date, status: TodoStatus) -> None:
        todo_rules.ensure_target_date_allowed(today - timedelta(days=30), status, today)


class TestBuildTodo:
    def test_defaults(self, user_id: UUID, today: date) -> None:
        todo = todo_rules.build_todo(user_id, "Buy milk", today=today)

        assert todo.user_id == user_id
        assert todo.status is TodoStatus.IN_PROGRESS
        assert todo.completed_date is None
        assert todo.target_date is None
        assert todo.description is None

    def test_rejects_past_target_date(self, user_id: UUID, today: date) -> None:
        with pytest.raises(ValidationError):
            todo_rules.build_todo(
                user_id, "Late", target_date=today - timedelta(days=1), today=today
            )


class TestApplyChanges:
    def test_omitted_fields_are_untouched(self, user_id: UUID, today: date) -> None:
        todo = _todo(user_id, description="keep me", target_date=today)

        todo_rules.apply_changes(todo, today=today, text="Renamed")

        assert todo.text == "Renamed"
        assert todo.description == "keep me"
        assert todo.target_date == today
        assert todo.status is TodoStatus.IN_PROGRESS

    def test_explicit_none_clears_target_date(self, user_id: UUID, today: date) -> None:
        todo = _todo(user_id, target_date=today + timedelta(days=3))

        todo_rules.apply_changes(todo, today=today, target_date=None)

        assert todo.target_date is None

    def test_explicit_none_clears_description(self, user_id: UUID, today: date) -> None:
        todo = _todo(user_id, description="old")

        todo_rules.apply_changes(todo, today=today, description=None)

        assert todo.description is None

    def test_first_completion_sets_completed_date(self, user_id: UUID, today: date) -> None:
        todo = _todo(user_id)

        todo_rules.apply_changes(todo, today=today, status="COMPLETED")

        assert todo.status is TodoStatus.COMPLETED
        assert todo.completed_date is not None

    def test_repeated_completion_keeps_first_timestamp(
        self, user_id: UUID, today: date
    ) -> None:
        first = datetime(2026, 3, 1, 9, 30)
        todo = _todo(user_id, status=TodoStatus.COMPLETED, completed_date=first)

        todo_rules.apply_changes(todo, today=today, status="COMPLETED")

        assert todo.completed_date == first

    @pytest.mark.parametrize("status", ["IN_PROGRESS", "CANCELLED"])
    def test_leaving_completed_clears_completed_date(
        self, user_id: UUID, today: date, status: str
    ) -> None:
        todo = _todo(
            user_id,
            status=TodoStatus.COMPLETED,
            completed_date=datetime(2026, 3, 1),
        )

        todo_rules.apply_changes(todo, today=today, status=status)

        assert todo.status is TodoStatus(status)
        assert todo.completed_date is None

    def test_past_date_allowed_when_completing_in_same_update(
        self, user_id: UUID, today: date
    ) -> None:
        todo = _todo(user_id)
        past = today - timedelta(days=5)

        todo_rules.apply_changes(todo, today=today, target_date=past, status="COMPLETED")

        assert todo.target_date == past
        assert todo.status is TodoStatus.COMPLETED

    def test_past_date_allowed_when_existing_status_is_cancelled(
        self, user_id: UUID, today: date
    ) -> None:
        todo = _todo(user_id, status=TodoStatus.CANCELLED)
        past = today - timedelta(days=5)

        todo_rules.apply_changes(todo, today=today, target_date=past)

        assert todo.target_date == past

    def test_past_date_rejected_for_active_task(self, user_id: UUID, today: date) -> None:
        todo = _todo(user_id)

        with pytest.raises(ValidationError):
            todo_rules.apply_changes(
                todo, today=today, target_date=today - timedelta(days=1)
            )

    def test_reactivation_with_stale_date_is_rejected(
        self, user_id: UUID, today: date
    ) -> None:
        todo = _todo(
            user_id,
            status=TodoStatus.COMPLETED,
            target_date=today - timedelta(days=2),
            completed_date=datetime(2026, 3, 1),
        )

        with pytest.raises(ValidationError):
            todo_rules.apply_changes(todo, today=today, status="IN_PROGRESS")

        assert todo.status is TodoStatus.COMPLETED

    def test_reactivation_allowed_when_date_is_moved_forward(
        self, user_id: UUID, today: date
    ) -> None:
        todo = _todo(
            user_id,
            status=TodoStatus.CANCELLED,
            target_date=today - timedelta(days=2),
        )

        todo_rules.apply_changes(
            todo, today=today, status="IN_PROGRESS", target_date=today + timedelta(days=1)
        )

        assert todo.status is TodoStatus.IN_PROGRESS

    def test_overdue_active_task_can_still_be_renamed(
        self, user_id: UUID, today: date
    ) -> None:
        todo = _todo(user_id, target_date=today - timedelta(days=3))

        todo_rules.apply_changes(todo, today=today, text="Still late")

        assert todo.text == "Still late"

    def test_rejected_update_leaves_todo_unchanged(
        self, user_id: UUID, today: date
    ) -> None:
        todo = _todo(user_id)

        with pytest.raises(ValidationError):
            todo_rules.apply_changes(todo, today=today, text="New", status="BOGUS")

        assert todo.text == "Sample Task"

    def test_invalid_status_is_rejected(self, user_id: UUID, today: date) -> None:
        with pytest.raises(ValidationError):
            todo_rules.apply_changes(_todo(user_id), today=today, status="ARCHIVED")

    def test_explicit_null_status_is_rejected(self, user_id: UUID, today: date) -> None:
        todo = _todo(user_id)

        with pytest.raises(ValidationError) as exc_info:
            todo_rules.apply_changes(todo, today=today, status=None)

        assert exc_info.value.error_code == ErrorCode.INVALID_STATUS
        assert todo.status is TodoStatus.IN_PROGRESS


class TestCategorize:
    def test_buckets(self, user_id: UUID, today: date) -> None:
        overdue = _todo(user_id, target_date=today - timedelta(days=1))
        due_today = _todo(user_id, target_date=today)
        undated = _todo(user_id)
        done = _todo(
            user_id,
            status=TodoStatus.COMPLETED,
            target_date=today - timedelta(days=10),
            completed_date=datetime(2026, 3, 1),
        )
        cancelled = _todo(
            user_id,
            status=TodoStatus.CANCELLED,
            target_date=today - timedelta(days=10),
        )

        result = todo_rules.categorize(
            [overdue, due_today, undated, done, cancelled], today
        )

        assert result.overdue == [overdue]
        assert result.in_progress == [due_today, undated]
        assert result.completed == [done]

    def test_cancelled_never_appears(self, today: date) -> None:
        cancelled = [
            _todo(uuid4(), status=TodoStatus.CANCELLED),
            _todo(uuid4(), status=TodoStatus.CANCELLED, target_date=today - timedelta(days=1)),
            _todo(uuid4(), status=TodoStatus.CANCELLED, target_date=today + timedelta(days=1)),
        ]

        result = todo_rules.categorize(cancelled, today)

        assert result.overdue == []
        assert result.in_progress == []
        assert result.completed == []

    def test_is_overdue_ignores_closed_tasks(self, user_id: UUID, today: date) -> None:
        past = today - timedelta(days=1)

        assert todo_rules.is_overdue(_todo(user_id, target_date=past), today)
        assert not todo_rules.is_overdue(
            _todo(user_id, target_date=past, status=TodoStatus.COMPLETED), today
        )
        assert not todo_rules.is_overdue(_todo(user_id, target_date=today), today)
