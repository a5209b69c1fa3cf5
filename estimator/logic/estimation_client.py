# logic/estimation_client.py

import json
import logging

import pydantic
from openai import AsyncOpenAI

from estimator.errors import ResponseParseError, ServiceError
from estimator.logic.prompt import RESPONSE_FORMAT, build_prompt
from estimator.models import EstimationResult, PropertyDescription

logger = logging.getLogger(__name__)

TEMPERATURE = 0.2


class EstimationClient:
    """
    Turns a PropertyDescription into an EstimationResult by asking the
    OpenAI chat completions API for a schema-constrained JSON answer.

    One outbound call per estimate(): no retries and no caching, so the same
    description asked twice is sent twice.
    """

    def __init__(self, client_factory, model: str):
        # Called once per estimate: pooled connections are bound to the event
        # loop that opened them, and each async view runs on its own loop.
        self.client_factory = client_factory
        self.model = model

    @classmethod
    def from_settings(cls, settings) -> "EstimationClient":
        def client_factory():
            return AsyncOpenAI(api_key=settings.api_key, base_url=settings.base_url)

        return cls(client_factory, settings.model)

    async def estimate(self, details: PropertyDescription) -> EstimationResult:
        prompt = build_prompt(details)
        logger.debug("Estimation prompt: %s", prompt)

        logger.info(
            "Requesting estimate from %s for %s (%s)",
            self.model,
            details.location,
            details.property_type.value,
        )

        try:
            async with self.client_factory() as client:
                response = await client.chat.completions.create(
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    response_format=RESPONSE_FORMAT,
                    temperature=TEMPERATURE,
                )
            text = (response.choices[0].message.content or "").strip()
        except Exception as e:
            logger.error("Error calling estimation service: %s", e)
            raise ServiceError() from e

        return parse_estimation(text)


def parse_estimation(text: str) -> EstimationResult:
    try:
        payload = json.loads(text)
        return EstimationResult.model_validate(payload)
    except (json.JSONDecodeError, pydantic.ValidationError) as e:
        logger.error("Malformed estimation payload %r: %s", text[:200], e)
        raise ResponseParseError() from e
