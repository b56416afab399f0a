# server/models/user.py

from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores username and bcrypt-hashed password for authentication.
    Achievements refer to users by username, not by id.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.now)
