# eventra/routes/events.py
from fastapi import APIRouter, HTTPException, Depends, File, Form, UploadFile, status
from eventra.models.event import EventCreate, Event
from eventra.database import EVENTS, NO_MONGO_ID, get_database
from eventra.utils.image_upload import CloudinaryUploader, get_image_uploader
from datetime import date, datetime, time
from loguru import logger
from pymongo import ReturnDocument
from typing import List, Optional, Union
import uuid

router = APIRouter()


async def find_event(db, event_id: str) -> dict:
    event = await db[EVENTS].find_one({"id": event_id}, NO_MONGO_ID)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("/createEvent", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    title: str = Form(...),
    owner: str = Form(""),
    description: str = Form(""),
    organized_by: str = Form("", alias="organizedBy"),
    event_date: Optional[date] = Form(None, alias="eventDate"),
    event_time: str = Form("", alias="eventTime"),
    location: str = Form(""),
    ticket_price: float = Form(0, alias="ticketPrice"),
    image: Union[UploadFile, str, None] = File(None),  # the web form sends "null" when no file is picked
    db=Depends(get_database),
    uploader: CloudinaryUploader = Depends(get_image_uploader),
):
    image_url = ""
    if isinstance(image, UploadFile) and image.filename:
        data = await image.read()
        if data:
            # A failed upload fails the whole create; nothing is written
            image_url = await uploader.upload(data, image.filename)

    event = EventCreate(
        owner=owner,
        title=title,
        description=description,
        organized_by=organized_by,
        # BSON has no date type, store midnight of the given day
        event_date=datetime.combine(event_date, time.min) if event_date else None,
        event_time=event_time,
        location=location,
        ticket_price=ticket_price,
        image=image_url,
    )
    event_data = Event(id=str(uuid.uuid4()), **event.model_dump()).model_dump(by_alias=True)

    await db[EVENTS].insert_one(event_data)
    logger.info(f"Created event {event_data['id']} '{title}'")
    return Event(**event_data)


@router.get("/createEvent", response_model=List[Event])
@router.get("/events", response_model=List[Event])
async def list_events(db=Depends(get_database)):
    return await db[EVENTS].find({}, NO_MONGO_ID).to_list(length=None)


@router.get("/event/{event_id}", response_model=Event)
@router.get("/event/{event_id}/ordersummary", response_model=Event)
@router.get("/event/{event_id}/ordersummary/paymentsummary", response_model=Event)
async def get_event(event_id: str, db=Depends(get_database)):
    return await find_event(db, event_id)


@router.post("/event/{event_id}", response_model=Event)
async def like_event(event_id: str, db=Depends(get_database)):
    # $inc is applied server-side, so concurrent likes are never lost
    event = await db[EVENTS].find_one_and_update(
        {"id": event_id},
        {"$inc": {"likes": 1}},
        projection=NO_MONGO_ID,
        return_document=ReturnDocument.AFTER,
    )
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event
