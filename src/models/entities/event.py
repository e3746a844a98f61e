from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, Text
from src.models.base import Base

class Event(Base):
    __tablename__ = 'events'
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    event_date = Column(Date, index=True)
    reminder_time = Column(DateTime)
    reminder_sent = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Event id={self.id} title={self.title!r} event_date={self.event_date}>"
