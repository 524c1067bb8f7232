#!/usr/bin/env python3
# etl/refresh_influencers.py

import argparse
import json
from typing import List, Optional

from ai.generator     import generate_influencers
from ai.model_client  import ModelClient
from ai.records       import GeneratedInfluencer
from api.config       import INFLUENCER_COUNT, OPENAI_API_KEY, OPENAI_MODEL
from api.crud         import replace_influencers
from api.models       import SessionLocal, init_db


# ————————————————
# 1) LOAD INTO DB
# ————————————————
def load_to_db(influencers: List[GeneratedInfluencer]) -> int:
    init_db()
    db = SessionLocal()
    try:
        return replace_influencers(db, influencers)
    finally:
        db.close()


# ————————————————
# 2) CLI
# ————————————————
def main(argv: Optional[List[str]] = None, client: Optional[ModelClient] = None) -> None:
    p = argparse.ArgumentParser(
        description="Generate health influencers with the model and replace the DB contents"
    )
    p.add_argument("--count", type=int, default=INFLUENCER_COUNT, help="How many influencers to generate")
    p.add_argument("--model", default=OPENAI_MODEL, help="Chat model to prompt")
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print JSON instead of writing to the DB"
    )
    args = p.parse_args(argv)

    client = client or ModelClient(api_key=OPENAI_API_KEY, model=args.model)
    influencers = generate_influencers(client, args.count)

    if args.dry_run:
        print(json.dumps([inf.model_dump(by_alias=True) for inf in influencers], indent=2))
    else:
        n = load_to_db(influencers)
        print(f"✅ Generated and loaded {n} influencers into DB")


if __name__ == "__main__":
    main()
