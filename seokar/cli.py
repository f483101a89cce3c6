"""Command-line interface for SeoKar AI."""

import asyncio
import sys
from pathlib import Path

import click

from . import __version__
from .ai.providers import PROVIDER_KEY_NAMES, PROVIDER_PRIORITY
from .ai.service import SuggestionService
from .core.config import AppConfig, ProviderConfig
from .core.logging import setup_logging


def _build_service(options_file: Path | None) -> SuggestionService:
    """Build a service from the environment and an optional options file."""
    app_config = AppConfig.from_env()
    setup_logging(app_config.log_level)
    if options_file is not None:
        provider_config = ProviderConfig.from_file(options_file)
    else:
        provider_config = ProviderConfig.from_env()
    return SuggestionService(provider_config, app_config)


def _print_result(result) -> None:
    """Print a suggestion result, exiting with status 1 on failure."""
    if not result.success:
        click.echo(
            click.style("Error: ", fg="red") + f"[{result.error.kind}] {result.error.message}",
            err=True,
        )
        sys.exit(1)

    if result.fallback:
        click.echo(click.style("Notice: ", fg="yellow") + result.html)
    else:
        click.echo(result.html)


options_option = click.option(
    "--options",
    "options_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with openai_api_key, google_api_key and huggingface_api_key",
)


@click.group()
@click.version_option(version=__version__, prog_name="seokar")
def main():
    """SeoKar AI - AI writing suggestions for the post editor."""
    pass


@main.command()
@options_option
def providers(options_file: Path | None):
    """Show configured providers and which one is active."""
    service = _build_service(options_file)
    active = service.active_provider()

    for name in PROVIDER_PRIORITY:
        configured = bool(service.provider_config.credential_for(PROVIDER_KEY_NAMES[name]))
        marker = "*" if active and active.name == name else " "
        status = click.style("configured", fg="green") if configured else "not configured"
        click.echo(f" {marker} {name.value:<12} {status}")

    if active is None:
        click.echo(click.style("No active provider.", fg="yellow"))
    else:
        kinds = ", ".join(kind.value for kind in service.supported_kinds())
        click.echo(f"Supported kinds: {kinds}")


@main.command()
@click.argument("kind")
@click.option("--title", "-t", default="", help="Current post title")
@click.option("--content", "-c", default="", help="Post content (HTML allowed)")
@click.option(
    "--content-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read post content from a file",
)
@options_option
def suggest(
    kind: str,
    title: str,
    content: str,
    content_file: Path | None,
    options_file: Path | None,
):
    """Request a suggestion of KIND (e.g. suggest_title)."""
    if content_file is not None:
        content = content_file.read_text(encoding="utf-8")

    service = _build_service(options_file)
    _print_result(asyncio.run(service.get_suggestion(kind, title, content)))


@main.command()
@click.option("--title", "-t", default="", help="Page title")
@click.option("--content", "-c", default="", help="Page content (HTML allowed)")
@options_option
def analyze(title: str, content: str, options_file: Path | None):
    """Analyze a page for SEO and readability."""
    service = _build_service(options_file)
    _print_result(asyncio.run(service.get_page_analysis(title, content)))


@main.command()
@click.option(
    "--host",
    "-h",
    default=None,
    help="Host to bind to (default: SEOKAR_HOST or 127.0.0.1)",
)
@click.option(
    "--port",
    "-p",
    default=None,
    type=int,
    help="Port to bind to (default: SEOKAR_PORT or 8000)",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload for development",
)
def run(host: str | None, port: int | None, reload: bool):
    """Start the suggestion API server."""
    import uvicorn

    app_config = AppConfig.from_env()
    host = host or app_config.host
    port = port or app_config.port

    click.echo(f"Starting SeoKar AI on http://{host}:{port}")
    uvicorn.run(
        "seokar.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=app_config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
