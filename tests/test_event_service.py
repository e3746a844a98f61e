"""Tests for EventService CRUD, merge semantics and error classification."""

import datetime as dt
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from src.core.exceptions import EventNotFoundError, InvalidFilterDateError, StoreAccessError
from src.models.domain.event import EventCreate, EventUpdate
from src.models.entities.event import Event


@pytest.mark.asyncio
async def test_create_event_starts_unsent(service):
    created = await service.create_event(EventCreate(
        title="Dentist",
        description="Annual check-up",
        eventDate=dt.date(2025, 10, 20),
        reminderTime=dt.datetime(2025, 10, 19, 18, 0),
    ))

    assert created.id is not None
    assert created.title == "Dentist"
    assert created.event_date == dt.date(2025, 10, 20)
    assert created.reminder_sent is False


@pytest.mark.asyncio
async def test_get_event_missing_raises_not_found(service):
    with pytest.raises(EventNotFoundError) as exc_info:
        await service.get_event(999)

    assert exc_info.value.status_code == 404
    assert exc_info.value.event_id == 999


@pytest.mark.asyncio
async def test_update_merges_fields_and_preserves_id_and_sent_flag(service, make_events, db_session):
    (event,) = make_events({"title": "Old", "description": "old", "reminder_sent": True})

    updated = await service.update_event(event.id, EventUpdate(
        title="New",
        description=None,
        event_date=dt.date(2026, 1, 1),
        reminder_time=dt.datetime(2025, 12, 31, 20, 0),
    ))

    assert updated.id == event.id
    assert updated.title == "New"
    assert updated.description is None
    assert updated.event_date == dt.date(2026, 1, 1)
    assert updated.reminder_time == dt.datetime(2025, 12, 31, 20, 0)
    assert updated.reminder_sent is True
    assert db_session.query(Event).count() == 1


@pytest.mark.asyncio
async def test_update_missing_does_not_touch_store(service, make_events, db_session):
    make_events({"title": "Keep me"})

    with patch.object(service.repository, "save", new_callable=AsyncMock) as mock_save:
        with pytest.raises(EventNotFoundError):
            await service.update_event(999, EventUpdate(title="Ghost"))

    mock_save.assert_not_called()
    assert [e.title for e in db_session.query(Event).all()] == ["Keep me"]


@pytest.mark.asyncio
async def test_delete_event(service, make_events, db_session):
    first, second = make_events({}, {})

    await service.delete_event(first.id)

    assert [e.id for e in db_session.query(Event).all()] == [second.id]


@pytest.mark.asyncio
async def test_delete_missing_raises_not_found(service):
    with pytest.raises(EventNotFoundError):
        await service.delete_event(42)


@pytest.mark.asyncio
async def test_get_events_ordered_by_id(service, make_events):
    events = make_events({"title": "b"}, {"title": "a"})

    result = await service.get_events()

    assert [e.id for e in result] == [e.id for e in events]


@pytest.mark.asyncio
async def test_get_paged_events_builds_page_response(service, twelve_events):
    page = await service.get_paged_events(page="1", size="5", sort_by="eventDate", direction="DESC")

    assert page.currentPage == 1
    assert page.totalItems == 12
    assert page.totalPages == 3
    assert [e.event_date for e in page.content] == [
        dt.date(2025, 10, 18) - dt.timedelta(days=i) for i in range(5)
    ]


@pytest.mark.asyncio
async def test_get_paged_events_bad_date_propagates(service):
    with pytest.raises(InvalidFilterDateError):
        await service.get_paged_events(after_date="2025/10/18")


@pytest.mark.asyncio
async def test_store_failure_is_reported_not_masked(service):
    failure = OperationalError("SELECT", {}, Exception("database is locked"))
    with patch.object(service.repository, "find_page", new_callable=AsyncMock, side_effect=failure):
        with pytest.raises(StoreAccessError) as exc_info:
            await service.get_paged_events()

    assert exc_info.value.status_code == 500
    assert exc_info.value.__cause__ is failure


@pytest.mark.asyncio
async def test_get_pending_reminders(service, make_events):
    due, _ = make_events(
        {"reminder_time": dt.datetime(2025, 10, 18, 8, 0)},
        {"reminder_time": dt.datetime(2025, 10, 18, 16, 0)},
    )

    pending = await service.get_pending_reminders(now=dt.datetime(2025, 10, 18, 12, 0))

    assert [e.id for e in pending] == [due.id]
