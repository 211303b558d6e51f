from __future__ import annotations

import hmac
from datetime import datetime, timezone
from typing import Any, Mapping

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from quickfix.core.config import Settings
from quickfix.core.errors import QuickFixError
from quickfix.core.generation import generate_completion
from quickfix.core.logging import get_logger, snippet
from quickfix.core.types import GenerationRequest

from .parsing import CompleteFix, ParseOutcome, PartialFix, UnparsedFix, parse_completion
from .prompts import compose_prompt
from .schemas import FixResult, GeneratePayload

log = get_logger("fixes")

CREDENTIAL_CHANNELS = {
    "POST": "Provide in 'x-api-key' header or 'Authorization: Bearer <key>' header",
    "GET": (
        "Provide in 'api_key' query parameter, 'x-api-key' header, "
        "or 'Authorization: Bearer <key>' header"
    ),
}

PROMPT_LOCATIONS = {
    "POST": "Include 'prompt' in request body JSON",
    "GET": "Include 'prompt' or 'q' as query parameter",
}


async def handle(request: Request, settings: Settings) -> JSONResponse:
    generation_request = await read_generation_request(request)

    authenticate(generation_request, settings)
    require_upstream_credential(settings)
    user_prompt = require_prompt(generation_request)

    status_code, payload = await generate_fix(user_prompt, settings)
    return JSONResponse(status_code=status_code, content=payload)


async def read_generation_request(request: Request) -> GenerationRequest:
    method = request.method.upper()
    body = await _read_json_body(request) if method == "POST" else None

    return GenerationRequest(
        method=method,
        prompt=extract_prompt(method, body, request.query_params),
        provided_credential=extract_credential(
            method,
            request.headers,
            request.query_params,
        ),
    )


def extract_credential(
    method: str,
    headers: Mapping[str, str],
    query: Mapping[str, str],
) -> str | None:
    header_key = headers.get("x-api-key")
    if header_key:
        return header_key

    authorization = headers.get("authorization")
    if authorization:
        token = authorization.replace("Bearer ", "", 1).strip()
        if token:
            return token

    if method == "GET":
        return query.get("api_key") or None

    return None


def extract_prompt(
    method: str,
    body: Any,
    query: Mapping[str, str],
) -> str | None:
    if method == "POST":
        if not isinstance(body, dict):
            return None
        try:
            prompt = GeneratePayload.model_validate(body).prompt
        except ValidationError:
            return None
    else:
        prompt = query.get("prompt") or query.get("q")

    if not isinstance(prompt, str) or not prompt.strip():
        return None
    return prompt


def authenticate(request: GenerationRequest, settings: Settings) -> None:
    if not settings.api_key:
        raise QuickFixError(
            status_code=500,
            message="API_KEY is not configured on server.",
        )

    if not request.provided_credential:
        raise QuickFixError(
            status_code=401,
            message="API key is required.",
            extra={"methods": dict(CREDENTIAL_CHANNELS)},
        )

    if not hmac.compare_digest(
        request.provided_credential.encode(),
        settings.api_key.encode(),
    ):
        raise QuickFixError(status_code=403, message="Invalid API key.")


def require_upstream_credential(settings: Settings) -> None:
    if not settings.gemini_api_key:
        raise QuickFixError(
            status_code=500,
            message="GEMINI_API_KEY is not configured.",
        )


def require_prompt(request: GenerationRequest) -> str:
    if request.prompt is None:
        raise QuickFixError(
            status_code=400,
            message="Prompt is required.",
            extra={"usage": dict(PROMPT_LOCATIONS)},
        )
    return request.prompt


async def generate_fix(
    user_prompt: str,
    settings: Settings,
) -> tuple[int, dict[str, Any]]:
    config = settings.generation

    try:
        completion = await generate_completion(
            compose_prompt(user_prompt),
            config,
            settings.gemini_api_key,
        )
    except Exception as exc:
        log.exception("Gemini request failed")
        return 500, {
            "success": False,
            "error": "Failed to generate response",
            "details": str(exc),
        }

    if not completion.text and completion.block_reason:
        log.info(f"Content generation blocked: {completion.block_reason}")
        return 400, {
            "success": False,
            "error": "Content generation blocked",
            "reason": completion.block_reason,
        }

    outcome = parse_completion(completion.text)
    return 200, build_envelope(outcome, config.model_id)


def build_envelope(outcome: ParseOutcome, model_id: str) -> dict[str, Any]:
    metadata: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "model": model_id,
    }

    if isinstance(outcome, UnparsedFix):
        log.warning(
            f"Model output was not valid JSON: {outcome.error}. "
            f"Snippet={snippet(outcome.raw_text)}"
        )
        result = FixResult(content=outcome.raw_text)
        metadata["parseError"] = "Response was not valid JSON"
    elif isinstance(outcome, PartialFix):
        log.info(f"Model output missing fields: {', '.join(outcome.missing)}")
        result = outcome.result
        metadata["warning"] = f"Missing fields: {', '.join(outcome.missing)}"
    elif isinstance(outcome, CompleteFix):
        result = outcome.result
        metadata["stepCount"] = len(result.steps)
    else:
        raise TypeError(f"Unknown parse outcome: {outcome!r}")

    return {
        "success": True,
        "data": result.to_payload(),
        "metadata": metadata,
    }


async def _read_json_body(request: Request) -> Any:
    body = await request.body()
    if not body:
        return None

    try:
        return await request.json()
    except ValueError:
        return None
