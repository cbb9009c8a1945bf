"""Command-line interface for the adoption catalog."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from adoption_catalog.catalog import (
    ALL_REGIONS,
    CatalogSnapshot,
    CatalogView,
    is_canonical_region,
    page_numbers,
    region_counts,
)
from adoption_catalog.config import get_settings
from adoption_catalog.utils.logging import get_logger, setup_logging
from adoption_catalog.utils.text import strip_markup, truncate_text

app = typer.Typer(
    name="adoption-catalog",
    help="Browse animals up for adoption by region",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def init_app():
    """Initialize the application."""
    settings = get_settings()
    setup_logging(settings.log_level)


def load_view(page_size: Optional[int] = None) -> CatalogView:
    """Create a view and load the listing, exiting on failure."""
    view = CatalogView(page_size=page_size)
    with console.status("Loading..."):
        view.reload()
    if view.error:
        console.print(f"[red]{view.error}[/red]")
        raise typer.Exit(1)
    return view


def _plain(text: str, max_length: Optional[int] = None) -> str:
    """Free text from the API, rendered as inert plain text."""
    text = strip_markup(text)
    if max_length:
        text = truncate_text(text, max_length)
    return escape(text)


def warn_unknown_region(region: str) -> None:
    """Flag region names outside the canonical list (the filter still applies)."""
    if region != ALL_REGIONS and not is_canonical_region(region):
        console.print(f"[yellow]Unknown region: {escape(region)}[/yellow]")


def _yes_no(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[dim]no[/dim]"


def render_snapshot(snapshot: CatalogSnapshot) -> None:
    """Print one page of the catalog."""
    if snapshot.is_loading:
        console.print("[dim]Loading...[/dim]")
        return
    if snapshot.error:
        console.print(f"[red]{snapshot.error}[/red]")
        return

    region_label = "all regions" if snapshot.selected_region == ALL_REGIONS else snapshot.selected_region
    table = Table(title=f"Animals in adoption ({escape(region_label)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Age")
    table.add_column("Status")
    table.add_column("Sex")
    table.add_column("Location")
    table.add_column("Description")

    for animal in snapshot.animals:
        table.add_row(
            str(animal.id),
            escape(animal.name),
            escape(animal.category),
            escape(animal.age),
            escape(animal.status),
            escape(animal.sex),
            escape(f"{animal.region}, {animal.comuna}"),
            _plain(animal.physical_description, max_length=80),
        )

    if snapshot.animals:
        console.print(table)
    else:
        console.print("[yellow]No animals found.[/yellow]")

    links = " ".join(
        f"[bold reverse]{n}[/bold reverse]" if n == snapshot.current_page else str(n)
        for n in page_numbers(snapshot.total_pages)
    )
    prev_mark = "<" if snapshot.has_previous else "[dim]<[/dim]"
    next_mark = ">" if snapshot.has_next else "[dim]>[/dim]"
    console.print(
        f"{prev_mark} {links} {next_mark}  "
        f"[dim]page {snapshot.current_page}/{snapshot.total_pages}, "
        f"{snapshot.filtered_count} animals[/dim]"
    )


# ============================================================================
# Browsing Commands
# ============================================================================


@app.command("browse")
def browse(
    region: str = typer.Option(ALL_REGIONS, "--region", "-r", help="Region to filter by"),
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", min=1, help="Animals per page"
    ),
):
    """Show one page of the catalog."""
    init_app()

    view = load_view(page_size)
    warn_unknown_region(region)
    view.select_region(region)
    view.go_to_page(page)

    render_snapshot(view.snapshot())


@app.command("regions")
def regions():
    """List the regions that currently have animals."""
    init_app()

    view = load_view()
    counts = region_counts(view.dataset)
    if not counts:
        console.print("[yellow]No regions found.[/yellow]")
        return

    table = Table(title="Regions")
    table.add_column("Region", style="cyan")
    table.add_column("Animals", justify="right")
    for name, count in counts.items():
        table.add_row(escape(name), str(count))
    console.print(table)


@app.command("show")
def show(
    animal_id: int = typer.Argument(..., help="Animal ID"),
):
    """Show the full record of one animal."""
    init_app()

    view = load_view()
    animal = view.find(animal_id)
    if animal is None:
        console.print(f"[red]Animal not found: {animal_id}[/red]")
        raise typer.Exit(1)

    console.print(Panel(
        f"[bold]{escape(animal.name)}[/bold]\n"
        f"{escape(animal.category)} - {escape(animal.age)}",
        title=escape(animal.status),
    ))
    console.print(f"[bold]Sex:[/bold] {escape(animal.sex)}")
    console.print(f"[bold]Sterilized:[/bold] {_yes_no(animal.is_sterilized)}")
    console.print(f"[bold]Vaccinated:[/bold] {_yes_no(animal.is_vaccinated)}")
    console.print(f"[bold]Location:[/bold] {escape(animal.region)}, {escape(animal.comuna)}")
    console.print(f"[bold]Team:[/bold] {escape(animal.team)}")

    for label, text in (
        ("Physical description", animal.physical_description),
        ("Personality", animal.personality_description),
        ("Additional information", animal.extra_description),
    ):
        plain = _plain(text)
        if plain:
            console.print(f"\n[bold]{label}:[/bold]\n{plain}")

    console.print(f"\n[bold]More information:[/bold] {escape(animal.detail_url)}")


@app.command("interactive")
def interactive(
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", min=1, help="Animals per page"
    ),
):
    """Browse the catalog page by page."""
    init_app()

    view = load_view(page_size)
    console.print(Panel(
        "n: next page   p: previous page   g N: go to page N\n"
        "r REGION: filter by region   r all: clear filter\n"
        "reload: fetch again   q: quit",
        title="Adoption Catalog",
    ))
    render_snapshot(view.snapshot())

    while True:
        try:
            command = console.input("\n[bold cyan]>[/bold cyan] ").strip()
        except (KeyboardInterrupt, EOFError):
            break

        if not command:
            continue
        if command in ("q", "quit", "exit"):
            break

        action, _, arg = command.partition(" ")
        arg = arg.strip()

        if action == "n":
            view.next_page()
        elif action == "p":
            view.previous_page()
        elif action == "g":
            try:
                page = int(arg)
            except ValueError:
                console.print("[red]Usage: g N[/red]")
                continue
            view.go_to_page(page)
        elif action == "r":
            if not arg:
                regions_line = ", ".join(view.snapshot().regions)
                console.print(f"[dim]Regions: {escape(regions_line)}[/dim]")
                continue
            warn_unknown_region(arg)
            view.select_region(arg)
        elif action == "reload":
            with console.status("Loading..."):
                view.reload()
        else:
            console.print(f"[red]Unknown command: {escape(command)}[/red]")
            continue

        render_snapshot(view.snapshot())

    console.print("\n[dim]Bye.[/dim]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
