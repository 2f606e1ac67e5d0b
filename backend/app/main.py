import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from . import repository
from .config import settings
from .db import Base, SessionLocal, engine, get_db
from .errors import PaintingNotFoundError, UserNotFoundError, register_exception_handlers
from .models import Painting
from .schemas import PaintingCreate, PaintingOut, UserOut
from .seed import seed_default_users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEFAULT_USERS:
        with SessionLocal() as db:
            seed_default_users(db)
    yield


app = FastAPI(title="Paint API", lifespan=lifespan)

# The painting frontend runs on its own dev server, so allow cross-origin calls.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/users", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    return repository.list_users(db)

@app.post("/paintings", response_model=PaintingOut)
def save_painting(payload: PaintingCreate, db: Session = Depends(get_db)):
    user = repository.get_user(db, payload.user_id)
    if not user:
        raise UserNotFoundError(payload.user_id)

    # Replace, not append: delete and insert commit together.
    previous = repository.find_painting_by_user(db, user)
    if previous:
        logger.info("painting_replaced user_id=%s painting_id=%s", user.id, previous.id)
        repository.delete_painting(db, previous)

    p = Painting(
        title=payload.title,
        shapes_data=payload.shapes_data,
        created_at=datetime.now(timezone.utc),
        user=user,
    )
    repository.save_painting(db, p)
    db.commit()
    db.refresh(p)
    return p

@app.get("/paintings/{user_id}", response_model=list[PaintingOut])
def get_paintings_by_user(user_id: int, db: Session = Depends(get_db)):
    user = repository.get_user(db, user_id)
    if not user:
        raise UserNotFoundError(user_id)
    p = repository.find_painting_by_user(db, user)
    return [p] if p else []

@app.get("/paintings/by-id/{painting_id}", response_model=PaintingOut)
def get_painting(painting_id: int, db: Session = Depends(get_db)):
    p = repository.get_painting(db, painting_id)
    if not p:
        raise PaintingNotFoundError(painting_id)
    return p
