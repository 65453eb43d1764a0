"""
Sequential Gemini fallback executor.

generate_with_fallback() tries each model in the given order, one at a time.
Every attempt is classified into an AttemptOutcome:
  - accepted       non-empty text AND finish reason STOP or MAX_TOKENS → return it
  - soft_failure   empty / blocked / unknown finish reason → next model, no wait
  - hard_failure   upstream or transport error:
                     400 (request rejected) → raise immediately, no more attempts
                     anything else          → wait RETRY_BACKOFF_SECONDS, next model
When the order is exhausted, the last recorded error is raised.
"""

import asyncio
import logging
from typing import Any, Literal, Optional

from google.genai import errors, types
from pydantic import BaseModel, ConfigDict

from gemini import config
from gemini.errors import AttemptTimeoutError, EmptyResponseError, NoModelResponseError

logger = logging.getLogger(__name__)

ACCEPTED_FINISH_REASONS = {types.FinishReason.STOP, types.FinishReason.MAX_TOKENS}


# ─── Outcome model ─────────────────────────────────────────────────────

class AttemptOutcome(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["accepted", "soft_failure", "hard_failure"]
    model: str
    reason: str
    response: Optional[Any] = None         # GenerateContentResponse when accepted
    error: Optional[Exception] = None      # set for both failure kinds
    retryable: bool = True                 # only meaningful for hard_failure


# ─── Classification ────────────────────────────────────────────────────

def _finish_reason_name(finish_reason) -> Optional[str]:
    if finish_reason is None:
        return None
    return getattr(finish_reason, "value", str(finish_reason))


def classify_response(model: str, response: types.GenerateContentResponse) -> AttemptOutcome:
    """Accept only a first candidate with text that finished normally or hit the token cap."""
    candidate = response.candidates[0] if response.candidates else None
    parts = candidate.content.parts if candidate and candidate.content and candidate.content.parts else []
    has_text = any(part.text for part in parts)
    finish_reason = candidate.finish_reason if candidate else None
    reason = _finish_reason_name(finish_reason) or "unknown"

    if has_text and finish_reason in ACCEPTED_FINISH_REASONS:
        return AttemptOutcome(kind="accepted", model=model, reason=reason, response=response)

    return AttemptOutcome(
        kind="soft_failure",
        model=model,
        reason=reason,
        error=EmptyResponseError(model, _finish_reason_name(finish_reason)),
    )


async def attempt_model(client, model: str, contents: list[types.Content]) -> AttemptOutcome:
    """One bounded upstream call, never raising for upstream/transport failures."""
    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config.GENERATION_CONFIG,
            ),
            timeout=config.ATTEMPT_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        error = AttemptTimeoutError(model, config.ATTEMPT_TIMEOUT_SECONDS)
        return AttemptOutcome(kind="hard_failure", model=model, reason=str(error), error=error)
    except errors.APIError as e:
        return AttemptOutcome(
            kind="hard_failure",
            model=model,
            reason=f"[{e.code}] {e.message}",
            error=e,
            retryable=e.code != 400,
        )
    except Exception as e:
        return AttemptOutcome(kind="hard_failure", model=model, reason=f"[500] {e}", error=e)

    return classify_response(model, response)


# ─── Public entry point ────────────────────────────────────────────────

async def generate_with_fallback(client, *, contents: list[types.Content], models: list[str]):
    """
    Try each model in `models` in order and return the first accepted
    GenerateContentResponse.

    Raises the 400 error as soon as one is seen, otherwise the last recorded
    error once every model has been tried.
    """
    last_error: Optional[Exception] = None

    for model in models:
        logger.info("Trying model %s", model)
        outcome = await attempt_model(client, model, contents)

        if outcome.kind == "accepted":
            logger.info("Valid response from %s (reason: %s)", model, outcome.reason)
            return outcome.response

        last_error = outcome.error

        if outcome.kind == "soft_failure":
            logger.warning("%s — trying next model", outcome.error)
            continue

        if not outcome.retryable:
            logger.warning("Request rejected by %s %s — aborting fallback", model, outcome.reason)
            raise outcome.error

        logger.warning("Error from %s %s — trying next model", model, outcome.reason)
        await asyncio.sleep(config.RETRY_BACKOFF_SECONDS)

    logger.error("All models in fallback order failed: %s", models)
    raise last_error or NoModelResponseError()
