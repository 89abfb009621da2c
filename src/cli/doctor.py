"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from urllib.parse import urlsplit

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, save_user_settings, user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _endpoint_origin(settings: AppSettings) -> str:
    parts = urlsplit(settings.redacted_endpoint_url())
    return f"{parts.scheme}://{parts.netloc}"


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="FitGen Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.has_usable_api_key:
        table.add_row("Gemini key", "OK", "Remote generation enabled")
    else:
        table.add_row("Gemini key", "OPTIONAL", "No key set -> deterministic fallback plans")
    env_file = user_env_file()
    table.add_row("Config file", "OK" if env_file.is_file() else "MISSING", str(env_file))
    table.add_row("Gemini model", "OK", settings.gemini_model)
    table.add_row("Endpoint", "OK", settings.redacted_endpoint_url())
    table.add_row(
        "Timeouts",
        "OK",
        f"connect {settings.connect_timeout_seconds:g}s / read {settings.read_timeout_seconds:g}s",
    )

    origin = _endpoint_origin(settings)
    ok_http, detail_http = asyncio.run(_check_http(origin, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", f"{origin} -> {detail_http}")

    _console.print(table)

    if not settings.has_usable_api_key:
        _console.print("\n[yellow]Tip:[/yellow] run `fitgen doctor setup-ai` to store a Gemini API key.")


@app.command(name="setup-ai")
def setup_ai() -> None:
    """Interactive AI setup (stores config in the user config .env)."""

    current = AppSettings()
    model = typer.prompt("Gemini model", default=current.gemini_model, show_default=True).strip()
    api_key = typer.prompt("Gemini API key", hide_input=True, confirmation_prompt=False).strip()

    if not model or not api_key:
        raise typer.BadParameter("model and API key are required")

    env_path = save_user_settings(
        {
            "FITGEN_GEMINI_MODEL": model,
            "FITGEN_GEMINI_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved AI config to:[/green] {env_path}")
