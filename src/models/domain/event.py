import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class EventBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = Field(None)
    event_date: Optional[dt.date] = Field(None, alias="eventDate")
    reminder_time: Optional[dt.datetime] = Field(None, alias="reminderTime")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v

class EventCreate(EventBase):
    pass

class EventUpdate(EventBase):
    pass

class EventResponse(EventBase):
    id: int
    reminder_sent: bool = Field(False, alias="reminderSent")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
