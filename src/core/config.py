"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El entrypoint construye `AppSettings` una vez y lo pasa explícitamente al
  cliente de generación y al orquestador (sin estado global mutable).
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "FITGEN_"
PLACEHOLDER_API_KEY = "CHANGE_ME"

DEFAULT_ENDPOINT_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent?key={api_key}"
)


def user_env_file() -> Path:
    """Ruta del .env global del usuario según la plataforma."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / "fitgen" / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """Lee un .env sencillo (KEY=value). Comentarios y líneas sin '=' se ignoran."""

    if not path.is_file():
        return {}

    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = value.strip().strip("'\"")
    return values


def _format_env_value(value: str) -> str:
    if any(ch.isspace() for ch in value) or "#" in value:
        return f'"{value}"'
    return value


def save_user_settings(updates: Mapping[str, str], *, env_file: Path | None = None) -> Path:
    """Fusiona `updates` en el .env de usuario y devuelve su ruta.

    Solo acepta variables `FITGEN_*`; el resto del fichero se conserva.
    El fichero se deja con permisos 0600 (contiene la API key).
    """

    foreign = sorted(key for key in updates if not key.startswith(ENV_PREFIX))
    if foreign:
        raise ValueError(f"not FitGen settings: {', '.join(foreign)}")

    path = env_file or user_env_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    merged = read_env_file(path)
    merged.update(updates)

    body = "".join(f"{key}={_format_env_value(value)}\n" for key, value in sorted(merged.items()))
    path.write_text("# fitgen user settings (fitgen doctor setup-ai)\n" + body, encoding="utf-8")
    path.chmod(0o600)
    return path


class AppSettings(BaseSettings):
    """Configuración central e inmutable de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - `frozen=True`: una vez construida, la configuración se comparte entre
      llamadas concurrentes sin riesgo.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(user_env_file())),
        env_file_encoding="utf-8",
    )

    gemini_api_key: str | None = Field(
        default=None,
        description="API key de Gemini. Vacía o 'CHANGE_ME' deshabilita la generación remota.",
    )
    gemini_model: str = Field(
        default="gemini-2.0-flash",
        min_length=1,
        description="Modelo de Gemini usado para generateContent.",
    )
    gemini_endpoint_template: str = Field(
        default=DEFAULT_ENDPOINT_TEMPLATE,
        min_length=8,
        description="Plantilla del endpoint con los huecos {model} y {api_key}.",
    )

    connect_timeout_seconds: float = Field(
        default=8.0,
        gt=0,
        description="Timeout de conexión hacia el proveedor IA (segundos).",
    )
    read_timeout_seconds: float = Field(
        default=25.0,
        gt=0,
        description="Timeout de lectura hacia el proveedor IA (segundos).",
    )
    user_agent: str = Field(
        default="fitgen/0.1",
        min_length=1,
        description="User-Agent para las peticiones salientes.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def has_usable_api_key(self) -> bool:
        key = (self.gemini_api_key or "").strip()
        return bool(key) and key != PLACEHOLDER_API_KEY

    def endpoint_url(self) -> str:
        return self.gemini_endpoint_template.format(
            model=self.gemini_model,
            api_key=(self.gemini_api_key or "").strip(),
        )

    def redacted_endpoint_url(self) -> str:
        """URL apta para logs: nunca incluye la credencial."""

        return self.gemini_endpoint_template.format(model=self.gemini_model, api_key="***")
