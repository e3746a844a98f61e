from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.orm import Session

from src.models.base import SessionLocal
from src.repositories.event_repository import EventRepository
from src.services.event_service import EventService

async def get_db() -> AsyncGenerator[Session, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

async def get_event_repository(db: Annotated[Session, Depends(get_db)]) -> EventRepository:
    return EventRepository(db)

async def get_event_service(
    repository: Annotated[EventRepository, Depends(get_event_repository)]
) -> EventService:
    return EventService(repository)

EventServiceDep = Annotated[EventService, Depends(get_event_service)]
