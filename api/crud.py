# api/crud.py
import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session, selectinload

from ai.records import GeneratedClaim, GeneratedInfluencer
from .models import Influencer, Post

logger = logging.getLogger(__name__)

# ids are INTEGER columns; anything outside can never match a row
MIN_ID, MAX_ID = 1, 2**31 - 1

def get_influencers(db: Session) -> List[Influencer]:
    return db.query(Influencer).order_by(Influencer.id).all()

def get_influencer(db: Session, id: int, with_posts: bool = False) -> Optional[Influencer]:
    if not MIN_ID <= id <= MAX_ID:
        return None
    q = db.query(Influencer)
    if with_posts:
        q = q.options(selectinload(Influencer.posts))
    return q.filter(Influencer.id == id).first()

def _to_post(claim: GeneratedClaim) -> Post:
    return Post(
        content=claim.content,
        status=claim.status,
        trust_score=claim.trust_score,
    )

def replace_influencers(db: Session, influencers: Iterable[GeneratedInfluencer]) -> int:
    """
    Swap the whole store for `influencers` in a single transaction.
    Posts go first so the foreign key never dangles; on any failure the
    session is rolled back and the previous rows stay in place.
    """
    try:
        db.query(Post).delete(synchronize_session=False)
        db.query(Influencer).delete(synchronize_session=False)

        rows = [
            Influencer(
                name=inf.name,
                category=inf.category,
                trust_score=inf.trust_score,
                followers_count=inf.followers_count,
                verified_claims=inf.verified_claims,
                posts=[_to_post(c) for c in inf.claims],
            )
            for inf in influencers
        ]
        db.add_all(rows)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("replaced store with %d influencers", len(rows))
    return len(rows)

def add_claims(db: Session, influencer_id: int, claims: Iterable[GeneratedClaim]) -> List[Post]:
    """Attach `claims` to an existing influencer as new posts."""
    posts = [_to_post(c) for c in claims]
    for p in posts:
        p.influencer_id = influencer_id
    try:
        db.add_all(posts)
        db.commit()
    except Exception:
        db.rollback()
        raise
    for p in posts:
        db.refresh(p)
    return posts
