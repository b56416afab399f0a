# server/api/achievements.py

import logging
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from fastapi import APIRouter, HTTPException, Depends, Response, status
from sqlalchemy.orm import Session

from server.api.auth import get_current_user
from server.core.utils import to_epoch_millis, serialize_achievement
from server.models.achievement import Achievement
from server.database import get_db


logger = logging.getLogger(__name__)

# -------------------------------
# Router & Request Schemas
# -------------------------------

router = APIRouter(prefix="/achievements")


class AchievementCreate(BaseModel):
    """
    Request schema for recording an accomplishment.
    The `user` field is accepted for compatibility but ownership
    always comes from the bearer token.
    """
    model_config = ConfigDict(populate_by_name=True)

    user: str | None = None
    achieve_what: str = Field(alias="achieveWhat")
    achieve_how: list[str] = Field(default_factory=list, alias="achieveHow")
    achieve_when: int | None = Field(default=None, alias="achieveWhen")
    achieve_why: str = Field(default="", alias="achieveWhy")

    @field_validator("achieve_when", mode="before")
    @classmethod
    def normalize_when(cls, value):
        return to_epoch_millis(value)


class AchievementUpdate(BaseModel):
    """
    Request schema for editing an accomplishment.
    Only the fields present in the body are written.
    """
    model_config = ConfigDict(populate_by_name=True)

    user: str | None = None
    achieve_what: str | None = Field(default=None, alias="achieveWhat")
    achieve_how: list[str] | None = Field(default=None, alias="achieveHow")
    achieve_when: int | None = Field(default=None, alias="achieveWhen")
    achieve_why: str | None = Field(default=None, alias="achieveWhy")

    @field_validator("achieve_when", mode="before")
    @classmethod
    def normalize_when(cls, value):
        return to_epoch_millis(value)


def get_owned_achievement(achievement_id: int, current_user: str, db: Session) -> Achievement:
    """
    Loads an achievement and checks that it belongs to the signed-in user.
    Raises 404 if it does not exist and 403 if another user owns it.
    """
    achievement = db.get(Achievement, achievement_id)
    if achievement is None:
        raise HTTPException(status_code=404, detail="Achievement not found")
    if achievement.user != current_user:
        logger.warning("User %s tried to access achievement %s owned by %s",
                       current_user, achievement_id, achievement.user)
        raise HTTPException(status_code=403, detail="Not allowed to access this achievement")
    return achievement


# -------------------------------
# Achievement Endpoints
# -------------------------------

@router.get("")
def list_achievements(
    order: Literal["when", "arrival"] = "when",
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Lists the signed-in user's achievements.
    Ordered by achieveWhen (then arrival) unless `order=arrival` is given.
    """
    query = db.query(Achievement).filter(Achievement.user == current_user)
    if order == "when":
        query = query.order_by(Achievement.achieve_when.asc(), Achievement.id.asc())
    else:
        query = query.order_by(Achievement.id.asc())
    return {"achievements": [serialize_achievement(a) for a in query.all()]}


@router.get("/{achievement_id}")
def get_achievement(
    achievement_id: int,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return serialize_achievement(get_owned_achievement(achievement_id, current_user, db))


@router.post("/create", status_code=status.HTTP_201_CREATED)
@router.post("", status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_achievement(
    req: AchievementCreate,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if req.user and req.user != current_user:
        logger.warning("Ignoring user %s in body; creating achievement for %s", req.user, current_user)

    achievement = Achievement(
        user=current_user,
        achieve_what=req.achieve_what,
        achieve_how=list(req.achieve_how),
        achieve_when=req.achieve_when,
        achieve_why=req.achieve_why,
    )
    db.add(achievement)
    db.commit()
    db.refresh(achievement)
    logger.info("Created achievement %s for %s", achievement.id, current_user)
    return serialize_achievement(achievement)


@router.put("/{achievement_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_achievement(
    achievement_id: int,
    req: AchievementUpdate,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    achievement = get_owned_achievement(achievement_id, current_user, db)

    updates = req.model_dump(exclude_unset=True, exclude={"user"})
    for field, value in updates.items():
        if value is None and field != "achieve_when":
            continue
        setattr(achievement, field, list(value) if field == "achieve_how" else value)

    db.commit()
    logger.info("Updated achievement %s (%s)", achievement_id, ", ".join(sorted(updates)) or "no fields")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{achievement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_achievement(
    achievement_id: int,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    achievement = get_owned_achievement(achievement_id, current_user, db)
    db.delete(achievement)
    db.commit()
    logger.info("Deleted achievement %s for %s", achievement_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
