# ai/prompts.py
from typing import List, Optional

CLAIM_FIELDS = """- "content" (the claim itself)
- "status" ("verified" or "unverified")
- "trustScore" (0-100)"""


def influencers_prompt(count: int) -> str:
    return f"""Generate a list of {count} health influencers with their details in JSON format.
Each influencer should include:
- "id"
- "name"
- "category" (Nutrition/Fitness/Mental Health/Medical)
- "trustScore" (0-100)
- "followersCount"
- "verifiedClaims" (number of verified claims)
- "claims" (an array of at least 5 of their most popular claims, both verified and unverified)

Each claim in the "claims" array should have:
{CLAIM_FIELDS}

Sort influencers by trustScore in descending order.
ONLY return valid JSON with no explanation or markdown formatting."""


def search_claims_prompt(name: str, topic: str) -> str:
    return f"""Find claims made by {name} related to {topic}. Return the result as a JSON array, each item containing:
{CLAIM_FIELDS}
Ensure the response is only valid JSON without any extra text or markdown formatting."""


def research_prompt(
    count: int,
    topic: Optional[str] = None,
    influencer: Optional[str] = None,
    date_range: Optional[str] = None,
) -> str:
    by = f" by {influencer}" if influencer else ""
    period = f" within the {date_range} time period" if date_range else ""
    return (
        f"Find {count} claims made about {topic or 'health'}{by}{period}. "
        "Return as a valid JSON array with fields: content, status (verified/unverified), trustScore. "
        "Ensure the output is plain JSON without any extra text or formatting."
    )


def scientific_claim_prompt(claim: str, journals: List[str]) -> str:
    sources = ", ".join(journals) if journals else "reputable peer-reviewed journals"
    return f"""Provide a scientifically verified claim related to: "{claim}" using sources from: {sources}.
Return the response as pure JSON in this format:
{{ "content": "scientific claim", "source": "journal/source name" }}
Ensure the response contains only valid JSON without extra text or formatting."""
