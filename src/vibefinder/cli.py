"""CLI interface for vibefinder."""

import asyncio
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

console = Console()


@click.command()
@click.option(
    "--catalog",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with venues (a list or {\"restaurants\": [...]}). Defaults to the bundled sample.",
)
@click.option(
    "--api-url",
    default=None,
    help="Base URL of the restaurants API (fetches <url>/api/restaurants)",
)
@click.option(
    "--mood",
    "-m",
    default=None,
    help="chill, lively, fancy or work. Prompted if omitted.",
)
@click.option(
    "--category",
    default=None,
    help="food or coffee. Prompted if omitted.",
)
@click.option(
    "--region",
    "-r",
    default=None,
    help="A city from the catalog or 'any'. Prompted if omitted.",
)
@click.option(
    "--locale",
    "-l",
    type=click.Choice(["en", "ar"]),
    default="en",
    help="Language for questions and match reasons",
)
@click.option(
    "--delay",
    type=float,
    default=1.5,
    help="Seconds to spend 'thinking' before showing results",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print results as JSON instead of a table",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def main(
    catalog: Path | None,
    api_url: str | None,
    mood: str | None,
    category: str | None,
    region: str | None,
    locale: str,
    delay: float,
    as_json: bool,
    verbose: bool,
) -> None:
    """
    VibeFinder - Find the three venues that best match your vibe.

    Example:

        vibefinder --mood fancy --category food --region Amman

    Against your own catalog, answering the questions interactively:

        vibefinder -c venues.json
    """
    code = asyncio.run(
        _main_async(
            catalog=catalog,
            api_url=api_url,
            preset={"mood": mood, "category": category, "region": region},
            locale=locale,
            delay=delay,
            as_json=as_json,
            verbose=verbose,
        )
    )
    if code:
        sys.exit(code)


async def _main_async(
    catalog: Path | None,
    api_url: str | None,
    preset: dict[str, str | None],
    locale: str,
    delay: float,
    as_json: bool,
    verbose: bool,
) -> int:
    """Async main function."""
    from vibefinder.catalog import CatalogError, fetch_catalog, load_catalog, load_sample_catalog
    from vibefinder.questionnaire import QuestionnaireError, QuestionnaireSession

    # Step 1: Load catalog
    try:
        if api_url:
            venues = await fetch_catalog(api_url, verbose=verbose)
            source = api_url
        elif catalog:
            venues = load_catalog(catalog, verbose=verbose)
            source = str(catalog)
        else:
            venues = load_sample_catalog(verbose=verbose)
            source = "bundled sample"
    except CatalogError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if not as_json:
        console.print(f"\n[bold blue]VibeFinder[/bold blue] - {len(venues)} venues from {source}\n")

    # Step 2: Questionnaire
    session = QuestionnaireSession(
        venues,
        locale=locale,
        thinking_delay=delay,
        verbose=verbose,
    )

    try:
        while (question := session.current_question) is not None:
            answer = preset.get(question.id)
            if answer is None:
                answer = click.prompt(
                    question.title(locale),
                    type=click.Choice(question.option_ids),
                    show_choices=True,
                )

            if session.state.step == len(session.questions) - 1:
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    console=console,
                    transient=True,
                    disable=as_json,
                ) as progress:
                    progress.add_task("Analyzing your vibe...", total=None)
                    await session.select(answer)
            else:
                await session.select(answer)
    except QuestionnaireError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    # Step 3: Results
    recommendation = session.recommendation
    if as_json:
        click.echo(json.dumps(recommendation.to_json_for_display(), ensure_ascii=False, indent=2))
        return 0

    if recommendation.is_empty:
        console.print("[yellow]No venues to recommend - the catalog is empty.[/yellow]")
        return 0

    table = Table(title="Top matches")
    table.add_column("#", justify="right")
    table.add_column("Venue")
    table.add_column("City")
    table.add_column("Price")
    table.add_column("Rating", justify="right")
    table.add_column("Match", justify="right")
    table.add_column("Why")
    for i, result in enumerate(recommendation.results, start=1):
        venue = result.venue
        table.add_row(
            str(i),
            venue.display_name(locale),
            venue.city,
            venue.price_range,
            f"{venue.rating:.1f}",
            f"{result.match_percent}%",
            result.match_reason,
        )
    console.print(table)
    console.print(f"\n[bold green]Done![/bold green] Answers: {recommendation.answers.model_dump()}\n")
    return 0


if __name__ == "__main__":
    main()
