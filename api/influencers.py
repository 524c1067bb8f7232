# api/influencers.py
import logging
import threading
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ai.extractor import MalformedResponseError
from ai.generator import generate_influencers
from ai.model_client import ModelClient, ModelClientError
from .config import INFLUENCER_COUNT
from .crud import get_influencer, get_influencers, replace_influencers
from .deps import get_db, get_model_client
from .schemas import InfluencerDetail, InfluencerOut, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["influencers"])

# one refresh at a time per process
_refresh_lock = threading.Lock()


@router.get("/influencers", response_model=MessageResponse)
def refresh_influencers(
    db: Session = Depends(get_db),
    client: ModelClient = Depends(get_model_client),
):
    """Regenerate every influencer and post. Old rows survive any failure."""
    with _refresh_lock:
        try:
            # 1) generate + validate before touching the store
            influencers = generate_influencers(client, INFLUENCER_COUNT)
            # 2) delete + insert as one transaction
            replace_influencers(db, influencers)
        except ModelClientError as e:
            logger.error("refresh: model provider failed: %s", e)
            raise HTTPException(status_code=500, detail="Failed to refresh influencer data")
        except MalformedResponseError as e:
            logger.error("refresh: malformed model response: %s raw=%r", e, e.raw)
            raise HTTPException(status_code=500, detail="Failed to refresh influencer data")
        except SQLAlchemyError:
            logger.exception("refresh: database error")
            raise HTTPException(status_code=500, detail="Failed to refresh influencer data")

    return {"message": "Influencers and posts refreshed successfully!"}


@router.get("/influencers/db", response_model=List[InfluencerOut])
def list_influencers(db: Session = Depends(get_db)):
    try:
        return get_influencers(db)
    except SQLAlchemyError:
        logger.exception("Error fetching influencers from database")
        raise HTTPException(
            status_code=500, detail="Failed to fetch influencer data from database"
        )


@router.get("/influencers/{influencer_id}", response_model=InfluencerDetail)
def read_influencer(influencer_id: int, db: Session = Depends(get_db)):
    try:
        influencer = get_influencer(db, influencer_id, with_posts=True)
    except SQLAlchemyError:
        logger.exception("Error fetching influencer details")
        raise HTTPException(status_code=500, detail="Failed to fetch influencer details")

    if influencer is None:
        raise HTTPException(status_code=404, detail="Influencer not found")
    return influencer
