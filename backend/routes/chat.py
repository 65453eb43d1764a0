import logging

from fastapi import APIRouter, HTTPException, Response

from gemini.client import API_KEY_ENV, get_client
from gemini.errors import describe_failure
from gemini.fallback import generate_with_fallback
from gemini.priority import choose_model_order, count_conversation_chars
from models.chat import ChatRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

# SDK-only fields that are not part of the upstream REST payload
_SDK_ONLY_FIELDS = {"sdk_http_response", "automatic_function_calling_history", "parsed"}


def _to_payload(response) -> dict:
    """
    Serialize a GenerateContentResponse back to its REST (camelCase) JSON shape.

    Known limitation: the payload is rebuilt from the SDK model, so REST fields
    the installed google-genai version does not model are dropped. Candidates,
    finishReason, usageMetadata and modelVersion survive the round trip.
    """
    return response.model_dump(
        mode="json",
        by_alias=True,
        exclude_none=True,
        exclude=_SDK_ONLY_FIELDS,
    )


# ---------- Endpoints ----------

@router.post("/api/generate")
async def generate(body: ChatRequest):
    """
    Picks a model order from the conversation size and walks it until one
    model returns a usable answer. The upstream payload is returned as-is.
    """
    client = get_client()
    if client is None:
        logger.error("%s is not set", API_KEY_ENV)
        raise HTTPException(status_code=500, detail="Server configuration error.")

    total_chars = count_conversation_chars(body.messages)
    models = choose_model_order(total_chars)

    try:
        response = await generate_with_fallback(client, contents=body.messages, models=models)
    except Exception as exc:
        logger.error("Final error in generate handler: %s", exc)
        status_code, message = describe_failure(exc)
        raise HTTPException(status_code=status_code, detail=message)

    return _to_payload(response)


@router.options("/api/generate")
async def generate_preflight():
    return Response(status_code=200)
