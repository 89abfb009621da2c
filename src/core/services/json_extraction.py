"""Aislamiento del objeto JSON dentro de la respuesta libre del proveedor."""

from __future__ import annotations

from core.errors import ExtractionError

_FENCE_MARKERS = ("```json", "```")


def extract_json_object(text: str | None) -> str:
    """Devuelve el substring entre la primera `{` y la última `}` (inclusive).

    Se eliminan antes los marcadores de fence de markdown. No se valida que el
    substring sea JSON: eso queda para el parser. Llaves anidadas ajenas al
    objeto no se distinguen de un JSON mal formado.
    """

    if text is None or not text.strip():
        raise ExtractionError("empty response")

    cleaned = text
    for marker in _FENCE_MARKERS:
        cleaned = cleaned.replace(marker, "")
    cleaned = cleaned.strip()

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if 0 <= start < end:
        return cleaned[start : end + 1]

    raise ExtractionError("no JSON braces found in response")
