# server/models/achievement.py

from sqlalchemy import Column, Integer, BigInteger, String, Text, DateTime, JSON
from datetime import datetime
from . import Base


class Achievement(Base):
    """
    One accomplishment recorded by a user.
    `user` holds the owner's username; there is no foreign key and no cascade.
    `achieve_when` is stored as epoch milliseconds.
    """
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, index=True)
    user = Column(String, index=True, nullable=False)
    achieve_what = Column(Text, nullable=False)
    achieve_how = Column(JSON, nullable=False, default=list)
    achieve_when = Column(BigInteger, nullable=True)
    achieve_why = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.now)
