import json
import threading

import pytest

from ai.extractor import MalformedResponseError
from ai.generator import (
    SCIENCE_MODEL,
    find_claims,
    generate_influencers,
    generate_scientific_claim,
    research_claims,
)
from ai.model_client import ModelClientError
from factories import FakeModelClient, failing, fenced, make_claim, make_influencer

PLACEHOLDER = {"content": "Failed to generate scientific claim", "source": "N/A"}


def test_generate_influencers_prompts_for_count():
    payload = [make_influencer(1, "Ann"), make_influencer(2, "Bob", n_claims=3)]
    model = FakeModelClient(lambda p, m: fenced(payload))

    out = generate_influencers(model, 2)

    assert [i.name for i in out] == ["Ann", "Bob"]
    assert [len(i.claims) for i in out] == [5, 3]
    assert "Generate a list of 2 health influencers" in model.calls[0][0]


@pytest.mark.parametrize("ids", [(1, 1), (1, "1"), ("inf-2", "inf-2")])
def test_generate_influencers_rejects_duplicate_ids(ids):
    payload = [make_influencer(ids[0], "Ann"), make_influencer(ids[1], "Bob")]
    model = FakeModelClient(lambda p, m: json.dumps(payload))
    with pytest.raises(MalformedResponseError):
        generate_influencers(model, 2)


def test_generate_influencers_allows_missing_ids():
    payload = [make_influencer(None, "Ann"), make_influencer(None, "Bob")]
    model = FakeModelClient(lambda p, m: json.dumps(payload))
    assert len(generate_influencers(model, 2)) == 2


def test_generate_influencers_propagates_provider_errors():
    with pytest.raises(ModelClientError):
        generate_influencers(FakeModelClient(failing), 15)


@pytest.mark.parametrize("reply", [
    [make_claim("a"), make_claim("b")],
    {"claims": [make_claim("a"), make_claim("b")]},
])
def test_find_claims_accepts_list_or_wrapper(reply):
    model = FakeModelClient(lambda p, m: json.dumps(reply))
    claims = find_claims(model, "Ann", "sleep")
    assert [c.content for c in claims] == ["a", "b"]
    assert "Find claims made by Ann related to sleep" in model.calls[0][0]


def test_find_claims_accepts_single_object():
    model = FakeModelClient(lambda p, m: json.dumps(make_claim("only")))
    assert [c.content for c in find_claims(model, "Ann", "sleep")] == ["only"]


def test_scientific_claim_uses_science_model_and_journals():
    model = FakeModelClient(lambda p, m: '{"content": "c", "source": "BMJ"}')
    sc = generate_scientific_claim(model, "Fasting helps", ["BMJ", "JAMA"])
    prompt, used = model.calls[0]
    assert sc.source == "BMJ"
    assert used == SCIENCE_MODEL
    assert "BMJ, JAMA" in prompt


def _raise_runtime(prompt, model):
    raise RuntimeError("socket closed")


@pytest.mark.parametrize("handler", [failing, _raise_runtime, lambda p, m: "no json"])
def test_scientific_claim_falls_back_to_placeholder(handler):
    sc = generate_scientific_claim(FakeModelClient(handler), "x", ["BMJ"])
    assert sc.model_dump() == PLACEHOLDER


def _research_handler(posts, bad=None, exc=ModelClientError):
    def handler(prompt, model):
        if prompt.startswith("Find "):
            return json.dumps(posts)
        if bad and bad in prompt:
            raise exc("boom")
        return json.dumps({"content": "backed", "source": "JAMA"})
    return handler


@pytest.mark.parametrize("exc", [ModelClientError, RuntimeError, KeyError])
def test_research_one_failing_item_does_not_abort_the_rest(exc):
    posts = [make_claim("one"), make_claim("two", "unverified", 20), make_claim("three")]
    model = FakeModelClient(_research_handler(posts, bad="two", exc=exc))

    out = research_claims(model, 3, ["JAMA"], date_range="last month")

    assert [r.content for r in out] == ["one", "two", "three"]
    assert out[0].scientific_claim.source == "JAMA"
    assert out[1].scientific_claim.model_dump() == PLACEHOLDER
    assert out[2].scientific_claim.content == "backed"
    assert len(model.calls) == 4


def test_research_second_stage_calls_run_concurrently():
    posts = [make_claim("one"), make_claim("two"), make_claim("three")]
    # only released once all three calls are in flight together
    barrier = threading.Barrier(3, timeout=5)

    def handler(prompt, model):
        if prompt.startswith("Find "):
            return json.dumps(posts)
        barrier.wait()
        return json.dumps({"content": "backed", "source": "JAMA"})

    out = research_claims(FakeModelClient(handler), 3, ["JAMA"], date_range="2024")

    assert [r.scientific_claim.source for r in out] == ["JAMA"] * 3


def test_research_passes_science_model_through():
    model = FakeModelClient(_research_handler([make_claim("one")]))
    research_claims(model, 1, [], date_range="2024", science_model="gpt-4o")
    assert model.calls[1][1] == "gpt-4o"


def test_research_keeps_extra_claim_fields():
    post = dict(make_claim("one"), url="https://example.com/p/1", platform="instagram")
    model = FakeModelClient(_research_handler([post]))

    [out] = research_claims(model, 1, ["JAMA"], date_range="2024")
    dumped = out.model_dump(by_alias=True)

    assert dumped["url"] == "https://example.com/p/1"
    assert dumped["platform"] == "instagram"
    assert dumped["scientificClaim"] == {"content": "backed", "source": "JAMA"}


def test_research_truncates_to_requested_count():
    posts = [make_claim(str(i)) for i in range(5)]
    model = FakeModelClient(_research_handler(posts))
    assert len(research_claims(model, 2, [], date_range="2024")) == 2


def test_research_prompt_defaults_topic_to_health():
    model = FakeModelClient(_research_handler([]))
    research_claims(model, 10, [], date_range="last year")
    assert model.calls[0][0].startswith("Find 10 claims made about health within the last year")
