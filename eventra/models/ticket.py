# eventra/models/ticket.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class TicketDetails(CamelModel):
    name: str
    email: str
    event_name: str
    event_date: Optional[str] = None
    event_time: Optional[str] = None
    ticket_price: float = 0
    qr_data_url: str = ""     # data: URL of the QR image rendered by the client

class TicketCreate(CamelModel):
    user_id: str
    event_id: str
    ticket_details: TicketDetails

class Ticket(TicketCreate):
    id: str

class TicketCreated(BaseModel):
    ticket: Ticket
