"""Exportación JSON de un plan generado.

Por qué JSON:
- Interoperabilidad: el archivo usa los mismos nombres camelCase que el
  contrato de la API (`weekNumber`, ...).
- Permite guardar el plan sin depender del render de la terminal.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import GenerationPayload


def plan_to_dict(plan: GenerationPayload) -> dict[str, object]:
    return plan.model_dump(mode="json", by_alias=True)


def export_plan_json(*, plan: GenerationPayload, output_path: Path) -> Path:
    """Exporta el plan a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(plan_to_dict(plan), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
