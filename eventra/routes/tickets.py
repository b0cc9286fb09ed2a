# eventra/routes/tickets.py
from fastapi import APIRouter, HTTPException, Depends, Response, status
from eventra.models.ticket import TicketCreate, Ticket, TicketCreated
from eventra.models.user import TokenData
from eventra.database import TICKETS, NO_MONGO_ID, get_database
from eventra.utils.auth_utils import get_current_user
from loguru import logger
from typing import List
import uuid


router = APIRouter()


@router.post("/tickets", response_model=TicketCreated, status_code=status.HTTP_201_CREATED)
async def create_ticket(ticket: TicketCreate, db=Depends(get_database)):
    # Stored as the client built it; event and price are not cross-checked
    ticket_data = Ticket(id=str(uuid.uuid4()), **ticket.model_dump()).model_dump(by_alias=True)
    await db[TICKETS].insert_one(ticket_data)
    logger.info(f"Created ticket {ticket_data['id']} for user {ticket.user_id} on event {ticket.event_id}")
    return TicketCreated(ticket=Ticket(**ticket_data))


@router.get("/tickets/user/{user_id}", response_model=List[Ticket])
async def list_user_tickets(user_id: str, db=Depends(get_database)):
    return await db[TICKETS].find({"userId": user_id}, NO_MONGO_ID).to_list(length=None)


@router.get("/tickets/{ticket_id}", response_model=List[Ticket])
async def list_tickets(ticket_id: str, db=Depends(get_database)):
    """Returns every ticket; the path id is accepted but not used as a filter."""
    return await db[TICKETS].find({}, NO_MONGO_ID).to_list(length=None)


@router.delete("/tickets/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket(
    ticket_id: str,
    current_user: TokenData = Depends(get_current_user),
    db=Depends(get_database),
):
    ticket = await db[TICKETS].find_one({"id": ticket_id}, NO_MONGO_ID)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    if ticket["userId"] != current_user.id:
        raise HTTPException(status_code=403, detail="Ticket belongs to another user")

    await db[TICKETS].delete_one({"id": ticket_id, "userId": current_user.id})
    logger.info(f"User {current_user.id} deleted ticket {ticket_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
