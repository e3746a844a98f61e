import datetime as dt
from typing import List, Optional, Union

import structlog

from src.core.exceptions import EventNotFoundError
from src.models.domain.event import EventCreate, EventResponse, EventUpdate
from src.models.domain.query import QueryDescriptor
from src.models.domain.response import PageResponse
from src.models.entities.event import Event
from src.repositories.event_repository import EventRepository
from src.services.event_query import RawInt, sanitize_query
from src.utils.helpers import handle_service_error

logger = structlog.get_logger(__name__)

class EventService:
    def __init__(self, repository: EventRepository):
        self.repository = repository

    async def _get_event_by_id(self, event_id: int) -> Event:
        try:
            event = await self.repository.get_by_id(event_id)
        except Exception as e:
            handle_service_error(e, "event_service", "get_event")

        if event is None:
            logger.warning("event_not_found", event_id=event_id)
            raise EventNotFoundError(event_id)

        return event

    async def get_paged_events(
        self,
        page: RawInt = None,
        size: RawInt = None,
        sort_by: Optional[str] = None,
        direction: Optional[str] = None,
        after_date: Union[str, dt.date, None] = None,
    ) -> PageResponse[EventResponse]:
        query = sanitize_query(page, size, sort_by, direction, after_date)
        return await self.get_page(query)

    async def get_page(self, query: QueryDescriptor) -> PageResponse[EventResponse]:
        try:
            result = await self.repository.find_page(query)
        except Exception as e:
            handle_service_error(e, "event_service", "get_paged_events")

        return PageResponse[EventResponse](
            content=[EventResponse.model_validate(event) for event in result.content],
            currentPage=result.page,
            totalItems=result.total_items,
            totalPages=result.total_pages,
        )

    async def get_events(self) -> List[EventResponse]:
        try:
            events = await self.repository.get_all()
            return [EventResponse.model_validate(event) for event in events]
        except Exception as e:
            handle_service_error(e, "event_service", "get_events")

    async def get_event(self, event_id: int) -> EventResponse:
        event = await self._get_event_by_id(event_id)
        return EventResponse.model_validate(event)

    async def create_event(self, event_data: EventCreate) -> EventResponse:
        try:
            event = Event(
                title=event_data.title,
                description=event_data.description,
                event_date=event_data.event_date,
                reminder_time=event_data.reminder_time,
                reminder_sent=False,
            )

            created_event = await self.repository.save(event)
            return EventResponse.model_validate(created_event)
        except Exception as e:
            handle_service_error(e, "event_service", "create_event")

    async def update_event(self, event_id: int, event_data: EventUpdate) -> EventResponse:
        event = await self._get_event_by_id(event_id)

        # id and reminder_sent are owned by the store, never by the request body
        event.title = event_data.title
        event.description = event_data.description
        event.event_date = event_data.event_date
        event.reminder_time = event_data.reminder_time

        try:
            updated_event = await self.repository.save(event)
            return EventResponse.model_validate(updated_event)
        except Exception as e:
            handle_service_error(e, "event_service", "update_event")

    async def delete_event(self, event_id: int) -> None:
        event = await self._get_event_by_id(event_id)
        try:
            await self.repository.delete(event)
        except Exception as e:
            handle_service_error(e, "event_service", "delete_event")

    async def get_pending_reminders(self, now: Optional[dt.datetime] = None) -> List[EventResponse]:
        now = now or dt.datetime.now()
        try:
            events = await self.repository.find_pending_reminders(now)
            return [EventResponse.model_validate(event) for event in events]
        except Exception as e:
            handle_service_error(e, "event_service", "get_pending_reminders")
