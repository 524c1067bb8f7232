# api/schemas.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ————————————————
# 1) REQUESTS
# ————————————————
class SearchClaimsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    influencer_id: int  = Field(alias="influencerId")
    topic:         str
    save:          bool = False


class ResearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    influencer:        Optional[str] = None
    topic:             Optional[str] = None
    date_range:        str           = Field(alias="dateRange")
    claims_to_analyze: int           = Field(10, alias="claimsToAnalyze", ge=1)
    journals:          List[str]     = []


# ————————————————
# 2) RESPONSES (read from ORM rows)
# ————————————————
class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id:            int
    content:       str
    status:        str
    trust_score:   int = Field(serialization_alias="trustScore")
    influencer_id: int = Field(serialization_alias="influencerId")


class InfluencerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id:              int
    name:            str
    category:        str
    trust_score:     int = Field(serialization_alias="trustScore")
    followers_count: int = Field(serialization_alias="followersCount")
    verified_claims: int = Field(serialization_alias="verifiedClaims")


class InfluencerDetail(InfluencerOut):
    posts: List[PostOut] = []


class MessageResponse(BaseModel):
    message: str
