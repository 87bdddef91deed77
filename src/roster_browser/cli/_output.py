from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.table import Table

from roster_browser.domain.dataset import DatasetSchema, FieldSpec, FieldType
from roster_browser.navigation import Navigation, Route
from roster_browser.services.paging import Page

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_player_page(columns: Sequence[str], page: Page, criteria: Mapping[str, str]) -> None:
    """Print one page of players as a table, with the active filters above it."""
    if criteria:
        active = ", ".join(f"{k}={v}" for k, v in sorted(criteria.items()))
        console.print(f"[bold]Filters:[/bold] {active}")
    if not page.total_records:
        console.print("No players found.")
        return
    if page.records:
        table = Table(show_edge=False, pad_edge=False)
        for column in columns:
            table.add_column(column)
        for record in page.records:
            table.add_row(*(record.get(column, "") for column in columns))
        console.print(table)
    else:
        console.print(f"No players on page {page.number}.")
    console.print(_page_footer(page))


def _page_footer(page: Page) -> str:
    plural = "s" if page.total_records != 1 else ""
    return f"Page {page.number}/{page.total_pages} ({page.total_records} player{plural})"


def print_filter_options(options: Mapping[str, Sequence[str]]) -> None:
    for field, values in options.items():
        console.print(f"[bold]{field}[/bold] ({len(values)})")
        if values:
            console.print("  " + ", ".join(values))


def _describe_field(spec: FieldSpec) -> str:
    label = spec.name if spec.required else f"{spec.name}?"
    return f"{label} (numeric)" if spec.type is FieldType.NUMERIC else label


def print_datasets(paths: Mapping[str, str], schemas: Sequence[DatasetSchema]) -> None:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Dataset")
    table.add_column("Path")
    table.add_column("Fields")
    for schema in schemas:
        fields = ", ".join(_describe_field(f) for f in schema.fields)
        table.add_row(str(schema.dataset), paths[schema.dataset], fields)
    console.print(table)


def print_routes(navigation: Navigation) -> None:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Path")
    table.add_column("Name")
    table.add_column("Title")
    for source, target in navigation.redirects.items():
        table.add_row(source, f"→ {target}", "")
    for route in navigation.routes:
        table.add_row(route.path, route.name, route.title)
    console.print(table)


def print_route(route: Route) -> None:
    console.print(f"[bold]{route.name}[/bold] {route.path}: {route.title}")
