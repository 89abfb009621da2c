"""Adaptador del proveedor IA (Gemini `generateContent` vía REST).

Responsabilidad:
- Enviar un prompt al endpoint configurado y agregar el texto de todos los
  candidatos y de todas sus partes.
- Nunca lanzar: cualquier fallo (credencial, red, status, cuerpo) vuelve como
  `NoResult` con el error tipado correspondiente.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.errors import ConfigurationError, TransportFailure
from core.interfaces.generation import GeneratedText, GenerationClient, GenerationResult, NoResult

logger = logging.getLogger(__name__)


def build_request_body(prompt: str) -> dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def _aggregate_candidate_text(candidates: list[Any]) -> str:
    chunks: list[str] = []
    for candidate in candidates:
        if not isinstance(candidate, dict):
            continue
        content = candidate.get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if isinstance(parts, list):
            for part in parts:
                if isinstance(part, dict) and part.get("text") is not None:
                    chunks.append(str(part["text"]))
        # Informativo: no altera el flujo.
        safety = candidate.get("safetyRatings")
        if safety:
            logger.debug("Gemini safety ratings: %s", safety)
    return "\n".join(chunks).strip()


class GeminiClient(GenerationClient):
    """Cliente de texto generativo para Gemini."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def generate(self, prompt: str) -> GenerationResult:
        if not self._settings.has_usable_api_key:
            logger.warning("Gemini API key missing or placeholder; remote generation disabled")
            return NoResult(ConfigurationError("missing_gemini_api_key"))

        try:
            logger.debug("POST %s", self._settings.redacted_endpoint_url())
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.post(self._settings.endpoint_url(), json=build_request_body(prompt))
        except httpx.HTTPError as exc:
            # El mensaje de httpx puede incluir la URL (con la key): solo el tipo.
            logger.error("Gemini request failed: %s", type(exc).__name__)
            return NoResult(TransportFailure(f"transport_error:{type(exc).__name__}"))
        except Exception as exc:
            # Config de endpoint inválida u otros fallos inesperados del transporte.
            logger.error("Gemini request could not be sent: %s", type(exc).__name__)
            return NoResult(TransportFailure(f"unexpected_error:{type(exc).__name__}"))

        if not response.is_success:
            logger.error("Gemini non-2xx status %s", response.status_code)
            return NoResult(TransportFailure(f"http_status:{response.status_code}"))

        if not response.content.strip():
            logger.error("Gemini empty body")
            return NoResult(TransportFailure("empty_body"))

        try:
            data: Any = response.json()
        except ValueError:
            logger.error("Gemini body is not valid JSON")
            return NoResult(TransportFailure("invalid_body"))

        if not isinstance(data, dict):
            logger.error("Gemini body is not a JSON object")
            return NoResult(TransportFailure("invalid_body"))

        error = data.get("error")
        if error is not None:
            logger.error("Gemini error payload: %s", error)
            return NoResult(TransportFailure("error_payload"))

        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            logger.error("Gemini response has no candidates")
            feedback = data.get("promptFeedback")
            if feedback:
                logger.debug("Gemini prompt feedback: %s", feedback)
            return NoResult(TransportFailure("no_candidates"))

        logger.debug("Gemini returned %d candidate(s)", len(candidates))
        text = _aggregate_candidate_text(candidates)
        if not text:
            logger.warning("Gemini produced empty aggregated text")
            return NoResult(TransportFailure("empty_text"))

        logger.debug("Gemini aggregated text length %d", len(text))
        return GeneratedText(text=text, candidate_count=len(candidates))
