# api/claims.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ai.extractor import MalformedResponseError
from ai.generator import find_claims, research_claims
from ai.model_client import ModelClient, ModelClientError
from ai.records import GeneratedClaim, ResearchResult
from .config import OPENAI_SCIENCE_MODEL
from .crud import add_claims, get_influencer
from .deps import get_db, get_model_client
from .schemas import ResearchRequest, SearchClaimsRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["claims"])

UPSTREAM_ERRORS = (ModelClientError, MalformedResponseError, SQLAlchemyError)


@router.post("/search-claims", response_model=List[GeneratedClaim])
def search_claims(
    req: SearchClaimsRequest,
    db: Session = Depends(get_db),
    client: ModelClient = Depends(get_model_client),
):
    """
    Ask the model what an influencer has said about a topic. Results are
    returned as-is and only stored when `save` is set.
    """
    try:
        influencer = get_influencer(db, req.influencer_id)
        if influencer is None:
            raise HTTPException(status_code=404, detail="Influencer not found")

        claims = find_claims(client, influencer.name, req.topic)
        logger.info(
            "found %d claims for influencer=%s topic=%r",
            len(claims), influencer.id, req.topic,
        )
        if req.save:
            add_claims(db, influencer.id, claims)
    except UPSTREAM_ERRORS as e:
        logger.error("Error searching claims: %s: %s", type(e).__name__, e)
        raise HTTPException(status_code=500, detail="Failed to search claims")

    return claims


@router.post("/research", response_model=List[ResearchResult])
def research(
    req: ResearchRequest,
    client: ModelClient = Depends(get_model_client),
):
    try:
        return research_claims(
            client,
            req.claims_to_analyze,
            req.journals,
            topic=req.topic,
            influencer=req.influencer,
            date_range=req.date_range,
            science_model=OPENAI_SCIENCE_MODEL,
        )
    except UPSTREAM_ERRORS as e:
        logger.error("Error in research endpoint: %s: %s", type(e).__name__, e)
        raise HTTPException(status_code=500, detail="Failed to process research request")
