"""
Event endpoints.

All responses use the envelope ``{"status", "message", "data"}``. Error
envelopes are produced by the global exception handlers in ``src.main``.
"""

from typing import Annotated, Any, List, Optional

import structlog
from fastapi import APIRouter, Query, status

from src.api.dependencies import EventServiceDep
from src.models.domain.event import EventCreate, EventResponse, EventUpdate
from src.models.domain.response import ApiResponse, PageResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/paged", response_model=ApiResponse[PageResponse[EventResponse]])
async def get_paged_events(
    service: EventServiceDep,
    page: Annotated[Optional[str], Query(description="Zero-based page index")] = None,
    size: Annotated[Optional[str], Query(description="Items per page (1-100, default 10)")] = None,
    sort_by: Annotated[
        Optional[str],
        Query(alias="sortBy", description="One of id, eventDate, title, reminderTime")
    ] = None,
    direction: Annotated[Optional[str], Query(description="asc or desc")] = None,
    after_date: Annotated[
        Optional[str],
        Query(alias="afterDate", description="Only events on or after this ISO date")
    ] = None,
):
    """
    Paginated, sorted, optionally date-filtered listing.

    Example:
        GET /events/paged?page=0&size=5&sortBy=eventDate&direction=desc&afterDate=2025-10-18

    Invalid page/size/sortBy/direction fall back to defaults. A malformed
    afterDate is rejected with 400.
    """
    result = await service.get_paged_events(page, size, sort_by, direction, after_date)

    logger.info(
        "events_paged_retrieved",
        page=page,
        size=size,
        sort_by=sort_by,
        direction=direction,
        after_date=after_date,
        returned=len(result.content),
        total_items=result.totalItems,
    )
    return ApiResponse.success("Paged Events retrieved", result)


@router.get("/reminders/pending", response_model=ApiResponse[List[EventResponse]])
async def get_pending_reminders(service: EventServiceDep):
    """Events whose reminder time has passed and whose reminder has not been sent."""
    events = await service.get_pending_reminders()
    logger.info("pending_reminders_retrieved", count=len(events))
    return ApiResponse.success("Pending reminders retrieved", events)


@router.get("", response_model=ApiResponse[List[EventResponse]])
async def get_events(service: EventServiceDep):
    events = await service.get_events()
    logger.info("events_retrieved", count=len(events))
    message = "No Events found." if not events else "Events retrieved successfully."
    return ApiResponse.success(message, events)


@router.get("/{event_id}", response_model=ApiResponse[EventResponse])
async def get_event(event_id: int, service: EventServiceDep):
    event = await service.get_event(event_id)
    logger.info("event_retrieved", event_id=event_id)
    return ApiResponse.success("Event retrieved successfully", event)


@router.post("", response_model=ApiResponse[EventResponse], status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate, service: EventServiceDep):
    created = await service.create_event(event)
    logger.info("event_created", event_id=created.id, title=created.title)
    return ApiResponse.success("Event Created", created)


@router.put("/{event_id}", response_model=ApiResponse[EventResponse])
async def update_event(event_id: int, event: EventUpdate, service: EventServiceDep):
    updated = await service.update_event(event_id, event)
    logger.info("event_updated", event_id=event_id)
    return ApiResponse.success("Event Updated.", updated)


@router.delete("/{event_id}", response_model=ApiResponse[Any])
async def delete_event(event_id: int, service: EventServiceDep):
    await service.delete_event(event_id)
    logger.info("event_deleted", event_id=event_id)
    return ApiResponse.success("Event Deleted.", None)
