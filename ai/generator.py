# ai/generator.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from ai.extractor import (
    MalformedResponseError, extract_json, parse_payload, validate_payload,
)
from ai.model_client import ModelClient
from ai.prompts import (
    influencers_prompt,
    research_prompt,
    scientific_claim_prompt,
    search_claims_prompt,
)
from ai.records import (
    SCIENTIFIC_CLAIM_PLACEHOLDER,
    GeneratedClaim,
    GeneratedInfluencer,
    ResearchResult,
    ScientificClaim,
)

logger = logging.getLogger(__name__)

SCIENCE_MODEL = "gpt-4"


# ————————————————
# 1) INFLUENCERS
# ————————————————
def generate_influencers(client: ModelClient, count: int) -> List[GeneratedInfluencer]:
    """Ask the model for `count` influencers with nested claims and validate them."""
    text = client.complete(influencers_prompt(count))
    influencers = parse_payload(text, List[GeneratedInfluencer])

    # 1 and "1" name the same influencer
    seen = set()
    for inf in influencers:
        if inf.id is None:
            continue
        key = str(inf.id).strip()
        if key in seen:
            raise MalformedResponseError(f"duplicate influencer id {inf.id!r}", text)
        seen.add(key)

    logger.info(
        "generated %d influencers with %d claims",
        len(influencers), sum(len(i.claims) for i in influencers),
    )
    return influencers


# ————————————————
# 2) CLAIM SEARCH
# ————————————————
def find_claims(client: ModelClient, name: str, topic: str) -> List[GeneratedClaim]:
    """
    Ask the model for claims `name` made about `topic`. The reply may be a
    list, a single claim, or an object wrapping a "claims" list.
    """
    return _claims_from(client.complete(search_claims_prompt(name, topic)))


def _claims_from(text: str) -> List[GeneratedClaim]:
    data = extract_json(text)
    if isinstance(data, dict):
        data = data["claims"] if "claims" in data else [data]
    return validate_payload(data, List[GeneratedClaim], text)


# ————————————————
# 3) RESEARCH (fan-out)
# ————————————————
def generate_scientific_claim(
    client: ModelClient,
    claim: str,
    journals: List[str],
    model: str = SCIENCE_MODEL,
) -> ScientificClaim:
    """Never raises: a failed call yields the placeholder claim."""
    try:
        text = client.complete(scientific_claim_prompt(claim, journals), model=model)
        return parse_payload(text, ScientificClaim)
    except Exception:
        logger.exception("Error generating scientific claim for %r", claim[:80])
        return ScientificClaim(**SCIENTIFIC_CLAIM_PLACEHOLDER)


def research_claims(
    client: ModelClient,
    count: int,
    journals: List[str],
    topic: Optional[str] = None,
    influencer: Optional[str] = None,
    date_range: Optional[str] = None,
    science_model: str = SCIENCE_MODEL,
) -> List[ResearchResult]:
    """
    Find `count` claims, then back each one with a scientific claim. The
    second-stage calls all run at once; output keeps claim order and any
    extra fields the model put on a claim.
    """
    text = client.complete(research_prompt(count, topic, influencer, date_range))
    posts = _claims_from(text)[:count]
    if not posts:
        return []

    with ThreadPoolExecutor(max_workers=len(posts)) as pool:
        scientific = list(pool.map(
            lambda post: generate_scientific_claim(
                client, post.content, journals, model=science_model
            ),
            posts,
        ))

    results = []
    for post, sc in zip(posts, scientific):
        fields = post.model_dump()
        fields.pop("scientificClaim", None)
        fields.pop("scientific_claim", None)
        results.append(ResearchResult(**fields, scientific_claim=sc))
    return results
