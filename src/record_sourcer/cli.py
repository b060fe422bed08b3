"""CLI interface for Record Sourcer."""

import asyncio
import json
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path
from collections.abc import Iterator
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

app = typer.Typer(
    name="record-sourcer",
    help="Generalize scraped genealogy records and build wiki citations",
    add_completion=False,
)
console = Console()


def load_environment() -> None:
    """Load settings overrides from a .env file."""
    from dotenv import load_dotenv

    load_dotenv()


def load_options(options_file: Path | None):
    from .config import Options

    if options_file is None:
        return Options()
    return Options.from_file(options_file)


def load_extracted_data(site: str, ed_file: Path, url: str | None) -> dict[str, Any]:
    """Read extracted data from JSON, or extract it from a saved WieWasWie page."""
    if not ed_file.exists():
        console.print(f"[red]Error: File not found: {escape(str(ed_file))}[/red]")
        raise typer.Exit(1)
    text = ed_file.read_text(encoding="utf-8")
    if ed_file.suffix.lower() in (".html", ".htm"):
        if site != "wiewaswie":
            console.print("[red]Error: HTML input is only supported for wiewaswie pages[/red]")
            raise typer.Exit(1)
        from .extractors.wiewaswie import extract_data

        return extract_data(text, url)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: {escape(str(ed_file))} is not valid JSON: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    if not isinstance(data, dict):
        console.print("[red]Error: Extracted data must be a JSON object[/red]")
        raise typer.Exit(1)
    return data


def parse_run_date(run_date: str | None) -> date:
    if not run_date:
        return date.today()
    try:
        return datetime.strptime(run_date, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]Error: Invalid date {escape(run_date)}, use YYYY-MM-DD[/red]")
        raise typer.Exit(1)


def print_text(text: str) -> None:
    # Citations are wiki text; brackets must not be read as rich markup
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def generalize_or_exit(site: str, ed: dict[str, Any]):
    from .exceptions import InvalidExtractedDataError, UnknownSiteError
    from .generalize import generalize_extracted_data

    try:
        return generalize_extracted_data(site, ed)
    except InvalidExtractedDataError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        console.print("[yellow]Could not interpret this page.[/yellow]")
        raise typer.Exit(1)
    except UnknownSiteError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@contextmanager
def action_boundary(name: str) -> Iterator[None]:
    """Report an unexpected failure in a command as a warning and exit 1."""
    from .logging import get_logger

    try:
        yield
    except (typer.Exit, typer.Abort):
        raise
    except Exception:
        get_logger(__name__).exception("command failed", command=name)
        console.print(
            f"[yellow]Warning: {name} failed because of an unexpected error.[/yellow]", soft_wrap=True
        )
        raise typer.Exit(1)


def setup(verbose: bool) -> None:
    from .logging import configure_logging

    load_environment()
    configure_logging("DEBUG" if verbose else "WARNING")


@app.command()
def generalize(
    site: str = typer.Argument(..., help="Site the data came from, e.g. freebmd"),
    ed_file: Path = typer.Argument(..., help="Extracted data JSON (or a saved WieWasWie page)"),
    url: str = typer.Option(None, "--url", "-u", help="Page URL for saved HTML pages"),
    as_json: bool = typer.Option(False, "--json", help="Print the full generalized data as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Show the generalized data for an extracted record."""
    setup(verbose)
    with action_boundary("Generalizing"):
        ed = load_extracted_data(site, ed_file, url)
        gd = generalize_or_exit(site, ed)

        if as_json:
            console.print_json(gd.model_dump_json(exclude_defaults=True))
            return

        table = Table(title=f"{gd.get_ref_title()} ({site})")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        rows = [
            ("Record type", gd.record_type.value),
            ("Name", gd.infer_full_name()),
            ("Gender", gd.person_gender),
            ("Event date", gd.infer_event_date()),
            ("Event place", gd.infer_event_place()),
            ("Birth date", gd.birth_date.get_date_string() if gd.birth_date else ""),
            ("Death date", gd.death_date.get_date_string() if gd.death_date else ""),
            ("Age", gd.age_at_event or gd.age_at_death),
            ("Registration district", gd.registration_district),
            ("Spouses", ", ".join(s.name.infer_full_name() for s in gd.spouses if s.name)),
        ]
        for label, value in rows:
            if value:
                table.add_row(label, escape(str(value)))
        console.print(table)


@app.command()
def cite(
    site: str = typer.Argument(..., help="Site the data came from, e.g. freebmd"),
    ed_file: Path = typer.Argument(..., help="Extracted data JSON (or a saved WieWasWie page)"),
    citation_type: str = typer.Option("inline", "--type", "-t", help="inline, source or narrative"),
    options_file: Path = typer.Option(None, "--options", "-o", help="JSON file of citation options"),
    run_date: str = typer.Option(None, "--date", "-d", help="Accessed date as YYYY-MM-DD"),
    url: str = typer.Option(None, "--url", "-u", help="Page URL for saved HTML pages"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Build a citation for an extracted record."""
    from .citation import CitationInput, CitationType, build_citation
    from .table import build_household_table, does_citation_want_household_table

    setup(verbose)
    try:
        kind = CitationType(citation_type)
    except ValueError:
        console.print(f"[red]Invalid type. Choose from: {[t.value for t in CitationType]}[/red]")
        raise typer.Exit(1)

    with action_boundary("Building citation"):
        options = load_options(options_file)
        ed = load_extracted_data(site, ed_file, url)
        gd = generalize_or_exit(site, ed)

        household_table = ""
        if does_citation_want_household_table(kind, gd, options):
            household_table = build_household_table(gd, options)
        result = build_citation(
            site,
            CitationInput(
                ed=ed,
                gd=gd,
                run_date=parse_run_date(run_date),
                type=kind,
                options=options,
                household_table_string=household_table,
            ),
        )
        print_text(result.citation)


@app.command()
def table(
    site: str = typer.Argument(..., help="Site the data came from, e.g. myheritage"),
    ed_file: Path = typer.Argument(..., help="Extracted data JSON (or a saved WieWasWie page)"),
    options_file: Path = typer.Option(None, "--options", "-o", help="JSON file of table options"),
    run_date: str = typer.Option(None, "--date", "-d", help="Accessed date as YYYY-MM-DD"),
    url: str = typer.Option(None, "--url", "-u", help="Page URL for saved HTML pages"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Build the household table for a census-like record."""
    from .citation import CitationInput, build_citation
    from .table import build_household_table

    setup(verbose)
    with action_boundary("Building household table"):
        options = load_options(options_file)
        ed = load_extracted_data(site, ed_file, url)
        gd = generalize_or_exit(site, ed)

        if not gd.has_household_table():
            console.print("[yellow]This record has no household to tabulate[/yellow]")
            raise typer.Exit(1)

        citation = None
        if options["table_general_autoGenerate"] == "citationInTableCaption":
            citation = build_citation(
                site, CitationInput(ed=ed, gd=gd, run_date=parse_run_date(run_date), options=options)
            )
        print_text(build_household_table(gd, options, citation))


@app.command("fs-citations")
def fs_citations(
    ed_file: Path = typer.Argument(..., help="FamilySearch person extracted data with sourceIds"),
    citation_type: str = typer.Option(None, "--type", "-t", help="Override the citation style"),
    options_file: Path = typer.Option(None, "--options", "-o", help="JSON file of citation options"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Build citations for every source attached to a FamilySearch person."""
    from .citation.fs_all_citations import build_all_citations

    setup(verbose)
    with action_boundary("Building FamilySearch citations"):
        options = load_options(options_file)
        if citation_type:
            options = options.with_overrides(addMerge_fsAllCitations_citationType=citation_type)
        ed = load_extracted_data("familysearch", ed_file, None)

        result = asyncio.run(build_all_citations(ed, options))
        if not result.success:
            console.print("[red]Error: Could not retrieve the FamilySearch source list[/red]")
            raise typer.Exit(1)
        if not result.citations_string:
            console.print("[yellow]No citations found[/yellow]")
            return
        print_text(result.citations_string)
        console.print(Panel(f"{len(result.sources)} sources", style="dim"))


if __name__ == "__main__":
    app()
