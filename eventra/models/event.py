# eventra/models/event.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

class EventBase(BaseModel):
    # Stored and served in camelCase (organizedBy, ticketPrice, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    owner: str = ""
    title: str
    description: Optional[str] = ""
    organized_by: Optional[str] = ""
    event_date: Optional[datetime] = None
    event_time: Optional[str] = ""
    location: Optional[str] = ""
    ticket_price: float = 0

class EventCreate(EventBase):
    image: str = ""           # hosted image URL, empty when no file was sent

class Event(EventCreate):
    id: str
    likes: int = 0
    # Bookkeeping fields, never written after creation
    participants: int = 0
    count: int = 0
    income: float = 0
