# api/deps.py
from functools import lru_cache
from typing import Iterator

from sqlalchemy.orm import Session

from ai.model_client import ModelClient
from .config import OPENAI_API_KEY, OPENAI_MODEL
from .models import SessionLocal

def get_db() -> Iterator[Session]:
    """One session per request, closed when the response is sent."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@lru_cache(maxsize=1)
def get_model_client() -> ModelClient:
    return ModelClient(api_key=OPENAI_API_KEY, model=OPENAI_MODEL)
