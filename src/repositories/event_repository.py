import datetime as dt
import logging
from typing import List

from sqlalchemy.orm import Query, Session

from src.models.domain.query import PageResult, QueryDescriptor, SortDirection
from src.models.entities.event import Event
from src.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

class EventRepository(BaseRepository[Event]):
    def __init__(self, db: Session):
        super().__init__(db, Event)

    async def find_page(self, query: QueryDescriptor) -> PageResult:
        """
        Fetch one page of events described by an already-sanitized query.

        Totals are counted over the full filtered set, not the page slice, so
        a page index past the end yields empty content with correct totals.
        """
        try:
            base = self.db.query(Event)
            if query.after_date is not None:
                base = base.filter(Event.event_date >= query.after_date)

            total_items = base.order_by(None).count()
            if query.offset >= total_items:
                # Past the end; also keeps OFFSET within the store's integer range
                content = []
            else:
                content = (
                    self._apply_order(base, query)
                    .offset(query.offset)
                    .limit(query.size)
                    .all()
                )

            logger.debug(
                f"Fetched {len(content)} of {total_items} events "
                f"(page={query.page}, size={query.size}, after_date={query.after_date})"
            )
            return PageResult(
                content=content,
                page=query.page,
                size=query.size,
                total_items=total_items,
            )
        except Exception as e:
            logger.error(f"Error fetching page of events: {str(e)}")
            raise

    async def find_pending_reminders(self, now: dt.datetime) -> List[Event]:
        """Events whose reminder is due and has not been sent yet."""
        try:
            return (
                self.db.query(Event)
                .filter(Event.reminder_sent.is_(False), Event.reminder_time <= now)
                .order_by(Event.reminder_time, Event.id)
                .all()
            )
        except Exception as e:
            logger.error(f"Error retrieving pending reminders: {str(e)}")
            raise

    @staticmethod
    def _apply_order(base: Query, query: QueryDescriptor) -> Query:
        clauses = []
        for order in query.orders:
            column = getattr(Event, order.field)
            clauses.append(column.desc() if order.direction is SortDirection.DESC else column.asc())
        return base.order_by(*clauses)
