# ai/records.py
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

ClaimStatus = Literal["verified", "unverified"]

SCIENTIFIC_CLAIM_PLACEHOLDER = {
    "content": "Failed to generate scientific claim",
    "source":  "N/A",
}


# Shapes the model is asked to emit (camelCase on the wire)
class GeneratedClaim(BaseModel):
    # extra keys the model adds are kept and passed back to callers
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    content:     str         = Field(min_length=1)
    status:      ClaimStatus
    trust_score: int         = Field(alias="trustScore", ge=0, le=100)

    @field_validator("status", mode="before")
    @classmethod
    def _lower_status(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class GeneratedInfluencer(BaseModel):
    """
    One influencer as emitted by the model. `id` is the model's own
    reference and is never stored; rows get ids from the database.
    """
    model_config = ConfigDict(populate_by_name=True)

    id:              Optional[Union[int, str]] = None
    name:            str                       = Field(min_length=1)
    category:        str                       = Field(min_length=1)
    trust_score:     int                       = Field(alias="trustScore", ge=0, le=100)
    followers_count: int                       = Field(alias="followersCount", ge=0)
    verified_claims: int                       = Field(alias="verifiedClaims", ge=0)
    claims:          List[GeneratedClaim]      = []


class ScientificClaim(BaseModel):
    content: str = Field(min_length=1)
    source:  str = Field(min_length=1)


class ResearchResult(GeneratedClaim):
    scientific_claim: ScientificClaim = Field(alias="scientificClaim")
