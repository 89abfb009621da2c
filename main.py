"""Entry point de desarrollo (sin instalar el paquete).

Permite ejecutar la CLI desde la raíz del repo con:
- `python -m main workout --muscle chest --duration 30 --level beginner`

El código vive en `src/`, así que sin `pip install -e .` Python no encuentra
`cli`, `core` ni `adapters`: se añade `src/` al path antes de importar.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
