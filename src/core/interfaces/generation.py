"""Contrato del cliente de generación de texto.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite inyectar un stub en tests y sustituir el proveedor (Gemini hoy)
  sin acoplar el orquestador a una implementación concreta.

Por qué un resultado discriminado:
- `GeneratedText` vs `NoResult` impide confundir un fallo del cliente con una
  generación legítimamente vacía: el cliente nunca devuelve texto en blanco.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class GeneratedText:
    """Texto agregado (no vacío) devuelto por el proveedor."""

    text: str
    candidate_count: int = 1


@dataclass(frozen=True)
class NoResult:
    """El proveedor no produjo texto utilizable.

    `error` suele ser `ConfigurationError` o `TransportFailure`.
    """

    error: Exception

    @property
    def reason(self) -> str:
        return str(self.error)


GenerationResult = Union[GeneratedText, NoResult]


@runtime_checkable
class GenerationClient(Protocol):
    """Contrato mínimo para un proveedor de texto generativo.

    Reglas de diseño:
    - `generate` es asíncrono porque hace I/O (HTTP).
    - Nunca lanza: cualquier fallo se devuelve como `NoResult`.
    """

    async def generate(self, prompt: str) -> GenerationResult:
        """Envía `prompt` al proveedor y devuelve el texto agregado o `NoResult`."""

        ...
