"""User and exercise routes."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_body_fields, get_store
from config.settings import settings
from models.store import Store
from services.log_filter import LogQuery, filter_log
from utils.dates import render_date, start_of_day
from utils.exceptions import NotFoundError, StoreError, ValidationError
from utils.logger import setup_logger
from utils.validators import parse_date, parse_number

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    """List every user."""
    users = await store.users.find_all()
    return [{"_id": user["_id"], "username": user["username"]} for user in users]


@router.post("")
async def create_user(
    fields: Dict[str, Any] = Depends(get_body_fields),
    store: Store = Depends(get_store),
):
    """Create a new user. Duplicate usernames are allowed."""
    username = fields.get("username")
    if not username:
        raise ValidationError("username is required")

    user = await store.users.create({"username": str(username)})
    return {"username": user["username"], "_id": user["_id"]}


@router.get("/{user_id}/logs")
async def get_user_log(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: Store = Depends(get_store),
):
    """
    Return a user's exercise log, optionally bounded by date and count.

    Lookup failures are reported as a 200 response carrying an error body.
    """
    try:
        user = await store.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("user not found")
        exercises = await store.exercises.find_all({"userId": user_id})
    except (StoreError, NotFoundError) as e:
        logger.warning(f"Log lookup failed for user {user_id}: {e.message}")
        return {"error": e.message}

    query = LogQuery.from_params(from_, to, limit)
    log = filter_log(exercises, query, settings.display_utc_offset_hours)

    return {
        "_id": user["_id"],
        "username": user["username"],
        "count": len(log),
        "log": [
            {
                "description": exercise["description"],
                "duration": exercise["duration"],
                "date": render_date(exercise["date"], settings.display_utc_offset_hours),
            }
            for exercise in log
        ],
    }


@router.post("//exercises")
async def create_exercise_without_user():
    raise ValidationError("missing user id")


@router.post("/{user_id}/exercises")
async def create_exercise(
    user_id: str,
    fields: Dict[str, Any] = Depends(get_body_fields),
    store: Store = Depends(get_store),
):
    """
    Log an exercise for a user.

    The exercise is stored before the user is looked up, so it is kept even
    when the user does not exist.
    """
    description = fields.get("description")
    raw_duration = fields.get("duration")
    raw_date = fields.get("date")

    if not user_id or not description or not raw_duration:
        raise ValidationError("missing required fields")

    duration = parse_number(raw_duration)
    if duration is None:
        raise ValidationError("duration must be a number")

    exercise_fields: Dict[str, Any] = {
        "userId": user_id,
        "description": str(description),
        "duration": duration,
    }
    if raw_date:
        day = parse_date(raw_date)
        if day is None:
            raise ValidationError("date must be in the format yyyy-mm-dd")
        exercise_fields["date"] = start_of_day(day, settings.display_utc_offset_hours)

    exercise = await store.exercises.create(exercise_fields)

    try:
        user = await store.users.find_by_id(user_id)
    except StoreError as e:
        logger.info(f"Exercise {exercise['_id']} references malformed user id: {e.message}")
        user = None

    if user is None:
        raise NotFoundError("user not found")

    return {
        "_id": user["_id"],
        "username": user["username"],
        "description": exercise["description"],
        "duration": exercise["duration"],
        "date": render_date(exercise["date"], settings.display_utc_offset_hours),
    }
