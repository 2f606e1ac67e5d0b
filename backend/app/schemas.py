from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone

class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class UserOut(CamelModel):
    id: int
    username: str
    display_name: str

class PaintingCreate(CamelModel):
    user_id: int
    title: str
    shapes_data: str  # serialized shapes, never parsed here

class PaintingOut(CamelModel):
    id: int
    title: str
    shapes_data: str
    created_at: datetime
    user: UserOut

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite drops the offset; timestamps are always written in UTC.
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
