import logging
from datetime import date, datetime, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy import select, update
from sqlalchemy.orm import Session, joinedload

from app.core.auth import get_current_user, get_current_user_id
from app.core.config import settings
from app.core.database import MAX_DB_ID, get_db
from app.core.dates import cancellation_cutoff, day_window, to_utc_naive, utc_now_naive
from app.core.errors import AlreadyCanceled, NotFound, TooLate, Unauthorized
from app.models.file import File
from app.models.meetup import Meetup
from app.models.user import User
from app.schemas.meetup import MeetupPublic, MeetupStore, MeetupSummary, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meetups", tags=["meetups"])

PAGE_SIZE = 20
# offset = (page - 1) * PAGE_SIZE tiene que caber en un INTEGER
MAX_PAGE = 100_000
CANCELLATION_NOTICE = timedelta(days=3)


def _is_owner(meetup: Meetup, user_id: int) -> bool:
    return meetup.user_id == user_id


def _cancel_error(meetup: Meetup, user_id: int, now: datetime) -> Optional[Exception]:
    """Primera regla que impide a ``user_id`` cancelar ``meetup`` en ``now`` (o None)."""
    if meetup.canceled_at is not None:
        return AlreadyCanceled()
    if not _is_owner(meetup, user_id):
        return Unauthorized()
    if now >= cancellation_cutoff(meetup.date, CANCELLATION_NOTICE):
        return TooLate()
    return None


@router.post("", response_model=MessageResponse)
def create_meetup(
    payload: MeetupStore,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not db.get(File, payload.banner_id):
        raise NotFound("File not found")

    meetup = Meetup(
        user_id=current_user.id,
        banner_id=payload.banner_id,
        title=payload.title,
        description=payload.description,
        address=payload.address,
        date=to_utc_naive(payload.date),
    )
    db.add(meetup)
    db.commit()

    logger.info("meetup %s created by user %s", meetup.id, current_user.id)
    return MessageResponse(message="The meetup was created")


@router.put("/{meetup_id}", response_model=MessageResponse)
def update_meetup(
    payload: MeetupStore,
    meetup_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    meetup = db.get(Meetup, meetup_id)
    if not meetup:
        raise NotFound("Meetup does not exist")

    if not _is_owner(meetup, user_id):
        raise Unauthorized()

    if not db.get(File, payload.banner_id):
        raise NotFound("Banner does not exist")

    # el owner se vuelve a comprobar dentro del UPDATE
    result = db.execute(
        update(Meetup)
        .where(Meetup.id == meetup_id, Meetup.user_id == user_id)
        .values(
            banner_id=payload.banner_id,
            title=payload.title,
            description=payload.description,
            address=payload.address,
            date=to_utc_naive(payload.date),
            updated_at=utc_now_naive(),
        )
    )
    if result.rowcount == 0:
        db.rollback()
        raise Unauthorized()
    db.commit()

    logger.info("meetup %s updated by user %s", meetup_id, user_id)
    return MessageResponse(message="The meetup has been updated")


@router.get("", response_model=list[MeetupSummary], dependencies=[Depends(get_current_user_id)])
def list_meetups(
    day: date = Query(..., alias="date"),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    db: Session = Depends(get_db),
):
    start, end = day_window(day, settings.TIMEZONE)

    stmt = (
        select(Meetup)
        .options(joinedload(Meetup.banner), joinedload(Meetup.owner))
        .where(Meetup.canceled_at.is_(None))
        .where(Meetup.date.between(start, end))
        .order_by(Meetup.date.asc(), Meetup.id.asc())
        .limit(PAGE_SIZE)
        .offset((page - 1) * PAGE_SIZE)
    )
    meetups = db.execute(stmt).scalars().all()

    return [MeetupSummary.model_validate(m) for m in meetups]


@router.get("/{meetup_id}", response_model=Optional[MeetupPublic], dependencies=[Depends(get_current_user_id)])
def get_meetup(
    meetup_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
):
    # null si no existe
    meetup = db.get(Meetup, meetup_id)
    if not meetup:
        return None
    return MeetupPublic.model_validate(meetup)


@router.delete("/{meetup_id}", response_model=MeetupPublic)
def cancel_meetup(
    meetup_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    meetup = db.get(Meetup, meetup_id)
    if not meetup:
        raise NotFound("Meetup does not exist")

    now = utc_now_naive()
    error = _cancel_error(meetup, user_id, now)
    if error:
        raise error

    result = db.execute(
        update(Meetup)
        .where(
            Meetup.id == meetup_id,
            Meetup.user_id == user_id,
            Meetup.canceled_at.is_(None),
            Meetup.date > now + CANCELLATION_NOTICE,
        )
        .values(canceled_at=now, updated_at=now)
    )
    if result.rowcount == 0:
        # otra request cambió la fila entre la lectura y la escritura
        db.rollback()
        db.refresh(meetup)
        raise _cancel_error(meetup, user_id, now) or AlreadyCanceled()
    db.commit()
    db.refresh(meetup)

    logger.info("meetup %s canceled by user %s", meetup_id, user_id)
    return MeetupPublic.model_validate(meetup)
