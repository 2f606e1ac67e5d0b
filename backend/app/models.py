from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .db import Base

class User(Base):
    __tablename__ = "users"

    # Ids are assigned by the caller (seeding), never generated.
    id = Column(Integer, primary_key=True, autoincrement=False)
    username = Column(String(100), unique=True, nullable=False)
    display_name = Column(String(100), nullable=False)

class Painting(Base):
    __tablename__ = "paintings"
    # Ids of replaced paintings must never be handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    shapes_data = Column(Text, nullable=False)  # opaque, stored verbatim
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # At most one painting per user is kept by the save endpoint, not by a constraint.
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    user = relationship("User", lazy="joined")
