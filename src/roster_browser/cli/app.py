from typing import Annotated

import typer

from roster_browser.cli._logging import configure_logging
from roster_browser.cli._output import (
    print_datasets,
    print_error,
    print_filter_options,
    print_player_page,
    print_route,
    print_routes,
)
from roster_browser.cli.factory import build_browse_context
from roster_browser.config import DataSettings, create_config, load_data_settings
from roster_browser.domain.dataset import SCHEMAS, Dataset, FieldType
from roster_browser.domain.result import Err, Ok
from roster_browser.filters.options import get_filter_options
from roster_browser.navigation import Navigation, default_navigation
from roster_browser.services.paging import paginate, sort_records

app = typer.Typer(name="rosterdb", help="Browse and filter the 9UP pro baseball player database")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Browse and filter the 9UP pro baseball player database."""
    configure_logging(verbose=verbose)
    if ctx.obj is None:
        ctx.obj = default_navigation()
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_DatasetArg = Annotated[Dataset, typer.Argument(help="Dataset to load", case_sensitive=False)]
_ConfigOpt = Annotated[str, typer.Option("--config", help="YAML config file")]
_BaseUrlOpt = Annotated[str | None, typer.Option("--base-url", help="Static host serving the CSV files")]
_DataDirOpt = Annotated[str | None, typer.Option("--data-dir", help="Local directory serving the CSV files")]


def _load_settings(config_path: str, base_url: str | None, data_dir: str | None) -> DataSettings:
    cfg = create_config(yaml_path=config_path, base_url=base_url, data_dir=data_dir)
    match load_data_settings(cfg):
        case Ok(settings):
            return settings
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


def _navigation(ctx: typer.Context) -> Navigation:
    navigation = ctx.find_object(Navigation)
    if navigation is None:
        raise RuntimeError("Navigation is not configured")
    return navigation


def _parse_filters(raw_filters: list[str] | None) -> dict[str, str]:
    criteria: dict[str, str] = {}
    for raw in raw_filters or []:
        field, sep, value = raw.partition("=")
        if not sep or not field.strip():
            print_error(f"Filter must look like FIELD=VALUE, got {raw!r}")
            raise typer.Exit(code=1)
        criteria[field.strip()] = value
    return criteria


@app.command()
def players(
    dataset: _DatasetArg,
    filter_: Annotated[
        list[str] | None, typer.Option("--filter", "-f", help="FIELD=VALUE filter (repeatable)")
    ] = None,
    sort: Annotated[str | None, typer.Option("--sort", help="Field to sort by")] = None,
    desc: Annotated[bool, typer.Option("--desc", help="Sort descending")] = False,
    page: Annotated[int, typer.Option("--page", min=1, help="Page number")] = 1,
    page_size: Annotated[int, typer.Option("--page-size", min=1, help="Players per page")] = 25,
    config_path: _ConfigOpt = "rosterdb.yaml",
    base_url: _BaseUrlOpt = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """List players in a dataset, narrowed by filters."""
    criteria = _parse_filters(filter_)
    settings = _load_settings(config_path, base_url, data_dir)
    with build_browse_context(settings) as ctx:
        match ctx.browser.open(dataset):
            case Ok(table):
                pass
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)

        unknown = sorted(set(criteria) - set(table.columns))
        if sort is not None and sort not in table.columns:
            unknown.append(sort)
        if unknown:
            print_error(f"Unknown field(s) for {dataset}: {', '.join(unknown)}")
            raise typer.Exit(code=1)

        for field, value in criteria.items():
            ctx.browser.set_filter(field, value)
        visible = ctx.browser.visible()
        if sort is not None:
            spec = table.schema.field(sort)
            numeric = spec is not None and spec.type is FieldType.NUMERIC
            visible = sort_records(visible, sort, numeric=numeric, descending=desc)
        print_player_page(table.columns, paginate(visible, page, page_size), ctx.browser.criteria)


@app.command()
def options(
    dataset: _DatasetArg,
    field: Annotated[list[str] | None, typer.Option("--field", help="Field to list values for (repeatable)")] = None,
    config_path: _ConfigOpt = "rosterdb.yaml",
    base_url: _BaseUrlOpt = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """Show the selectable values of each select field."""
    settings = _load_settings(config_path, base_url, data_dir)
    with build_browse_context(settings) as ctx:
        match ctx.browser.open(dataset):
            case Ok(table):
                if field:
                    print_filter_options(get_filter_options(table.records, field))
                else:
                    print_filter_options(ctx.browser.options)
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)


@app.command()
def datasets(
    config_path: _ConfigOpt = "rosterdb.yaml",
    base_url: _BaseUrlOpt = None,
    data_dir: _DataDirOpt = None,
) -> None:
    """List the known datasets, where they are served from and their fields."""
    settings = _load_settings(config_path, base_url, data_dir)
    print_datasets(settings.paths, [SCHEMAS[d] for d in Dataset])


@app.command()
def routes(ctx: typer.Context) -> None:
    """Show the page routing table."""
    print_routes(_navigation(ctx))


@app.command()
def resolve(ctx: typer.Context, path: Annotated[str, typer.Argument(help="Page path, e.g. /players")]) -> None:
    """Resolve a page path to the route that serves it."""
    navigation = _navigation(ctx)
    route = navigation.resolve(path)
    print_route(route)
    if route is navigation.fallback:
        raise typer.Exit(code=1)
