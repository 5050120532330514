"""Command-line interface for prlens."""

from dataclasses import dataclass
from typing import NoReturn, Optional

import click

from prlens.app import Application, build_application
from prlens.config import load_settings
from prlens.config.settings import VERSION
from prlens.core.exceptions import PRLensError, ValidationError
from prlens.core.query import filter_pull_requests, sort_pull_requests
from prlens.core.schema import (
    APISort,
    DisplayFormat,
    FetchCriteria,
    FilterCriteria,
    PRState,
    SortCriteria,
    SortDirection,
    SortField,
)
from prlens.core.validation import require_option, require_repo, sanitize_input
from prlens.presentation import (
    format_cache_stats,
    format_filter_summary,
    format_rate_limit,
    render,
)


@dataclass(frozen=True)
class FetchOptions:
    repository: str
    format: str = DisplayFormat.COMPACT.value
    state: str = PRState.OPEN.value
    sort: str = SortField.CREATED.value
    direction: str = SortDirection.DESC.value
    author: Optional[str] = None
    label: Optional[str] = None
    min_comments: Optional[int] = None
    max_pages: int = 5
    per_page: int = 30


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="prlens")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Fetch and display GitHub pull requests.

    Run without a command to be prompted for every option interactively.
    """
    if ctx.obj is None:
        try:
            ctx.obj = build_application(load_settings())
        except PRLensError as error:
            _fail("Configuration error", error)
    if ctx.invoked_subcommand is None:
        _run_interactive(ctx.obj)


@cli.command(name="fetch")
@click.argument("repository")
@click.option("--format", "-f", "fmt", default="compact", show_default=True,
              help="Output format: compact, detailed, json")
@click.option("--state", "-s", default="open", show_default=True,
              help="PR state: open, closed, all")
@click.option("--sort", "sort_field", default="created", show_default=True,
              help="Sort by: created, updated, comments, title")
@click.option("--direction", default="desc", show_default=True,
              help="Sort direction: asc, desc")
@click.option("--author", default=None, help="Filter by author username")
@click.option("--label", default=None, help="Filter by label name")
@click.option("--min-comments", type=click.IntRange(min=0), default=None,
              help="Filter by minimum number of comments")
@click.option("--max-pages", type=click.IntRange(min=1), default=None,
              help="Maximum pages to fetch [default: 5]")
@click.option("--per-page", type=click.IntRange(1, 100), default=None,
              help="Results per page [default: 30]")
@click.pass_obj
def fetch(
    app: Application,
    repository: str,
    fmt: str,
    state: str,
    sort_field: str,
    direction: str,
    author: Optional[str],
    label: Optional[str],
    min_comments: Optional[int],
    max_pages: Optional[int],
    per_page: Optional[int],
) -> None:
    """Fetch and display pull requests from REPOSITORY (owner/repo)."""
    options = FetchOptions(
        repository=repository,
        format=fmt,
        state=state,
        sort=sort_field,
        direction=direction,
        author=author,
        label=label,
        min_comments=min_comments,
        max_pages=max_pages or app.settings.fetch.max_pages,
        per_page=per_page or app.settings.fetch.per_page,
    )
    run_fetch(app, options)


@cli.command(name="cache")
@click.option("--clear", "-c", is_flag=True, help="Clear all cached data")
@click.option("--stats", "-s", is_flag=True, help="Show cache statistics")
@click.pass_obj
def cache(app: Application, clear: bool, stats: bool) -> None:
    """Manage the in-memory result cache."""
    if clear:
        app.cache.clear()
        click.secho("Cache cleared successfully", fg="green")
        return
    click.echo(format_cache_stats(app.cache.stats()))


@cli.command(name="rate-limit")
@click.pass_obj
def rate_limit(app: Application) -> None:
    """Check GitHub API rate limit status."""
    try:
        with app.open_fetcher() as fetcher:
            limit = fetcher.get_rate_limit()
    except PRLensError as error:
        _fail("Error checking rate limit", error)
    click.echo(format_rate_limit(limit))


def run_fetch(app: Application, options: FetchOptions) -> None:
    """Validate ``options`` then fetch, filter, sort and print the results."""
    try:
        owner, repo = require_repo(options.repository)
        fmt = require_option(DisplayFormat, options.format)
        sort_criteria = SortCriteria(
            field=require_option(SortField, options.sort),
            direction=require_option(SortDirection, options.direction),
        )
        state = require_option(PRState, options.state)
    except ValidationError as error:
        _fail(error.message)

    criteria = FetchCriteria(
        owner=owner,
        repo=repo,
        state=state.value,
        sort=_api_sort_for(sort_criteria.field).value,
        direction=sort_criteria.direction.value,
        per_page=options.per_page,
        max_pages=options.max_pages,
    )

    try:
        with app.open_fetcher() as fetcher:
            _status("Verifying credentials...")
            if not fetcher.verify_credentials():
                _fail("Authentication failed. Please check your GitHub token.")
            _status(f"Fetching pull requests from {options.repository}...")
            result = fetcher.fetch_pull_requests(criteria)
    except PRLensError as error:
        _fail("Error fetching pull requests", error)

    pull_requests = list(result.pull_requests)
    click.secho(f"Fetched {len(pull_requests)} pull request(s)", fg="green", err=True)

    filter_criteria = FilterCriteria(
        author=sanitize_input(options.author) or None,
        label=sanitize_input(options.label) or None,
        min_comments=options.min_comments,
    )
    filtered = pull_requests
    if not filter_criteria.is_empty():
        filtered = filter_pull_requests(pull_requests, filter_criteria)
        click.secho(
            format_filter_summary(len(filtered), len(pull_requests)),
            fg="bright_black",
            err=True,
        )

    ordered = sort_pull_requests(filtered, sort_criteria)
    click.echo(render(ordered, fmt))

    if result.pagination.has_next_page:
        click.secho(
            "More results available. Increase --max-pages to fetch additional pages.",
            fg="yellow",
            err=True,
        )


def _run_interactive(app: Application) -> None:
    click.secho("prlens interactive mode", bold=True, err=True)
    repository = click.prompt("Repository (owner/repo)")
    state = click.prompt(
        "PR state",
        type=click.Choice([member.value for member in PRState]),
        default=PRState.OPEN.value,
    )
    fmt = click.prompt(
        "Output format",
        type=click.Choice([member.value for member in DisplayFormat]),
        default=DisplayFormat.COMPACT.value,
    )
    sort_field = click.prompt(
        "Sort by",
        type=click.Choice([member.value for member in SortField]),
        default=SortField.CREATED.value,
    )
    direction = click.prompt(
        "Sort direction",
        type=click.Choice([member.value for member in SortDirection]),
        default=SortDirection.DESC.value,
    )
    author = click.prompt("Filter by author (blank for none)", default="", show_default=False)
    label = click.prompt("Filter by label (blank for none)", default="", show_default=False)
    min_comments = click.prompt(
        "Minimum comments (0 for none)",
        type=click.IntRange(min=0),
        default=0,
    )
    max_pages = click.prompt(
        "Maximum pages to fetch",
        type=click.IntRange(min=1),
        default=app.settings.fetch.max_pages,
    )
    run_fetch(
        app,
        FetchOptions(
            repository=repository.strip(),
            format=fmt,
            state=state,
            sort=sort_field,
            direction=direction,
            author=author or None,
            label=label or None,
            min_comments=min_comments or None,
            max_pages=max_pages,
            per_page=app.settings.fetch.per_page,
        ),
    )


def _api_sort_for(field: SortField) -> APISort:
    if field is SortField.UPDATED:
        return APISort.UPDATED
    return APISort.CREATED


def _status(message: str) -> None:
    click.secho(message, fg="cyan", err=True)


def _fail(message: str, error: Optional[PRLensError] = None) -> NoReturn:
    if error is not None:
        message = f"{message}: {error.message}"
    raise click.ClickException(message)


def main() -> None:
    cli(prog_name="prlens")


if __name__ == "__main__":
    main()
