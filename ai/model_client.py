# ai/model_client.py
import logging
from typing import Optional

from openai import OpenAI, OpenAIError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class ModelClientError(RuntimeError):
    """The model provider could not produce a completion."""


class ModelClient:
    """
    Thin wrapper over the OpenAI chat completions API. A missing `api_key`
    falls back to the OPENAI_API_KEY environment variable inside the SDK.
    """

    def __init__(self, api_key: Optional[str] = None, model: str = DEFAULT_MODEL):
        self.model = model
        self._api_key = api_key
        self._client: Optional[OpenAI] = None

    @property
    def client(self) -> OpenAI:
        # built on first use so a missing key surfaces as a request failure
        if self._client is None:
            try:
                self._client = OpenAI(api_key=self._api_key)
            except OpenAIError as e:
                raise ModelClientError(f"cannot create OpenAI client: {e}") from e
        return self._client

    def complete(self, prompt: str, model: Optional[str] = None) -> str:
        """Send `prompt` as a single user message and return the first choice's text."""
        model = model or self.model
        logger.debug("chat completion model=%s prompt_chars=%d", model, len(prompt))
        try:
            resp = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as e:
            raise ModelClientError(f"{model} request failed: {e}") from e

        if not resp.choices or not resp.choices[0].message.content:
            raise ModelClientError(f"{model} returned an empty completion")
        return resp.choices[0].message.content
