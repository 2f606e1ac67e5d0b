from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .models import Painting, User


def list_users(db: Session):
    return db.execute(select(User).order_by(User.id)).scalars().all()


def get_user(db: Session, user_id: int):
    return db.get(User, user_id)


def count_users(db: Session) -> int:
    return db.execute(select(func.count()).select_from(User)).scalar_one()


def add_user(db: Session, user: User):
    db.add(user)


def find_painting_by_user(db: Session, user: User):
    return (
        db.execute(select(Painting).where(Painting.user_id == user.id).order_by(Painting.id))
        .scalars()
        .first()
    )


def get_painting(db: Session, painting_id: int):
    return db.get(Painting, painting_id)


def save_painting(db: Session, painting: Painting):
    """Insert a new painting row and flush so its id is populated."""
    db.add(painting)
    db.flush()
    return painting


def delete_painting(db: Session, painting: Painting):
    db.delete(painting)
    db.flush()
