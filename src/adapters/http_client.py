"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts (conexión corta, lectura larga) y headers para el
  proveedor IA.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_timeout(settings: AppSettings) -> httpx.Timeout:
    """Timeout de conexión y de lectura por separado (8s / 25s por defecto)."""

    return httpx.Timeout(
        settings.read_timeout_seconds,
        connect=settings.connect_timeout_seconds,
    )


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=build_timeout(settings),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
