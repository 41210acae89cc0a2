"""
SciClope Command Line Interface

Main entry point for the sciclope CLI.
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from sciclope.exceptions import SciClopeError, get_error_code

console = Console()


def _load_context(path: str = None, entry_point: str = "unknown"):
    """Build the site context, exiting with the mapped code on failure."""
    from sciclope.startup import load_context

    try:
        return load_context(
            entry_point=entry_point,
            install_path=Path(path) if path else None,
        )
    except SciClopeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(get_error_code(e))


@click.group()
@click.version_option(package_name="sciclope")
def main():
    """SciClope: site bootstrap and web installer"""
    pass


@main.command()
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", type=int, default=8080, help="Port number")
@click.option("--path", type=click.Path(), help="Installation path (default: SCICLOPE_PATH)")
@click.option("--debug", is_flag=True, help="Enable Flask debug mode and verbose logging")
def serve(host: str, port: int, path: str, debug: bool):
    """Run the development web server.

    Serves the site index at / and the web installer at /install.
    """
    import logging
    from sciclope.logging_config import setup_logging
    from sciclope.web import create_app

    context = _load_context(path, entry_point="index")
    if debug:
        context.debug = True
    setup_logging(level=logging.DEBUG if context.debug else None)

    app = create_app(context)
    console.print(f"[bold blue]SciClope {context.version}[/bold blue] on http://{host}:{port}/")
    if not context.config_exists:
        console.print(f"[yellow]⚠[/yellow] No configuration at {context.config_file}; "
                      f"open http://{host}:{port}/install to set up the site")
    app.run(host=host, port=port, debug=context.debug)


@main.command()
@click.option("--path", type=click.Path(), help="Installation path (default: SCICLOPE_PATH)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def status(path: str, json_output: bool):
    """Show install path, configuration and installer fingerprint."""
    from sciclope.install.fingerprint import fingerprint

    context = _load_context(path)
    info = {
        "install_path": str(context.install_path),
        "config_file": str(context.config_file),
        "config_exists": context.config_exists,
        "version": context.version,
        "debug": context.debug,
        "fingerprint": fingerprint(str(context.install_path), context.version),
    }

    if json_output:
        click.echo(json.dumps(info, indent=2))
        return

    table = Table(title="SciClope Status", border_style="blue")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    for key, value in info.items():
        if isinstance(value, bool):
            value = "[green]yes[/green]" if value else "[yellow]no[/yellow]"
        table.add_row(key, str(value))
    console.print(table)

    if not context.config_exists:
        console.print()
        console.print("[yellow]⚠[/yellow] Site is not configured. "
                      "Run [cyan]sciclope serve[/cyan] and open /install.")


@main.command("fingerprint")
@click.option("--path", type=click.Path(), help="Installation path (default: SCICLOPE_PATH)")
@click.option("--version", "version_", help="Installer version (default: installed version)")
def fingerprint_cmd(path: str, version_: str):
    """Print the installer fingerprint for a path and version."""
    from sciclope.install.fingerprint import fingerprint
    from sciclope.startup import detect_install_path
    from sciclope import __version__

    install_path = path or str(detect_install_path())
    try:
        click.echo(fingerprint(install_path, version_ or __version__))
    except SciClopeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(get_error_code(e))


if __name__ == "__main__":
    main()
