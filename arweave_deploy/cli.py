#!/usr/bin/env python3
"""
Arweave deploy CLI
Commands: deploy, manifest, help
"""
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import DeploySettings
from .errors import DeployError
from .manifest import ManifestStore
from .wallet import load_wallet
from .walker import deploy

THEME = {
    "text": "#c9d1d9",
    "text_dim": "#8b949e",
    "accent": "#58a6ff",
    "success": "#3fb950",
    "warning": "#d29922",
    "error": "#f85149",
}

logger = logging.getLogger(__name__)

console = Console(style=THEME["text"], width=120)

USAGE = (
    "[bold]Usage:[/bold] [cyan]arweave-deploy[/cyan] \\[command]\n\n"
    "[bold]Commands:[/bold]\n"
    "  [cyan]deploy[/cyan]    - Upload ./dist and publish a new manifest (default)\n"
    "  [cyan]manifest[/cyan]  - Show the paths recorded in ./manifest.json\n"
    "  [cyan]help[/cyan]      - Show this help message"
)


def configure_logging(level: str) -> None:
    """Route log records through the rich console"""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
    )


def print_error(title: str, message: str):
    console.print(
        Panel(
            f"[bold red]✗ Error[/bold red]\n\n[dim]{escape(message)}[/dim]",
            title=f"[bold]{title}[/bold]",
            border_style="red",
            box=box.ROUNDED,
        )
    )


def run_deploy(settings: DeploySettings) -> int:
    """Load the wallet, deploy and report the manifest id"""
    try:
        jwk = load_wallet(settings.wallet_path)
        manifest_id = deploy(jwk, settings)
    except DeployError as e:
        print_error("Deployment failed", str(e))
        return 1
    except Exception as e:
        logger.debug("Unexpected deploy failure", exc_info=True)
        print_error("Deployment failed", f"{type(e).__name__}: {e}")
        return 1

    console.print(
        Panel(
            f"[bold green]Deployment Complete! 🎉[/bold green]\n\n"
            f"[dim]Transaction ID:[/dim] [cyan]{manifest_id}[/cyan]\n"
            f"[dim]View your deployment at:[/dim] [cyan]{settings.viewer_url(manifest_id)}[/cyan]",
            title="[bold]Success[/bold]",
            border_style="green",
            box=box.ROUNDED,
        )
    )
    return 0


def show_manifest(settings: DeploySettings) -> int:
    """Print the paths recorded in the local manifest"""
    manifest = ManifestStore(settings.manifest_path).load()
    if not manifest.paths:
        console.print(
            Panel(
                "[yellow]No files deployed yet[/yellow]\n\n[dim]Run [cyan]arweave-deploy deploy[/cyan] to publish ./dist.[/dim]",
                title="[bold]Manifest[/bold]",
                border_style="yellow",
                box=box.ROUNDED,
            )
        )
        return 0

    table = Table(
        title="[bold cyan]Deployed Paths[/bold cyan]",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
        border_style="blue",
    )
    table.add_column("Path", style="green")
    table.add_column("Content ID", style="cyan", no_wrap=True)
    table.add_column("Index", justify="center", width=7)

    for path, entry in sorted(manifest.paths.items()):
        marker = "[bold green]●[/bold green]" if path == manifest.index.path else ""
        table.add_row(escape(path), entry.id, marker)

    console.print(table)
    console.print(f"\n[dim]Total: {len(manifest.paths)} path(s)[/dim]")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    args = sys.argv[1:] if argv is None else argv
    command = args[0].lower() if args else "deploy"

    settings = DeploySettings.from_env()
    configure_logging(settings.log_level)

    if command == "deploy":
        return run_deploy(settings)
    if command == "manifest":
        return show_manifest(settings)
    if command in ("help", "-h", "--help"):
        console.print(Panel(USAGE, title="[bold]Arweave Deploy[/bold]", border_style="cyan", box=box.ROUNDED))
        return 0

    print_error("Unknown command", f"{command}\n\nRun arweave-deploy help for available commands.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
