"""
Main CLI entry point for multilookup.

Builds a lookup over records loaded from a YAML or JSON file and queries
it from the command line. Mostly useful for checking what a set of key
expressions produces over real data.
"""

import json as _json
import pathlib as _pathlib
import typing as _typing

import click as _click
import rich.console as _rich_console
import rich.table as _rich_table
import yaml as _yaml

import multilookup
import multilookup.config as config
import multilookup.core as core
import multilookup.errors as errors

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_DUPLICATE_CHOICES = ["first", "last", "fail"]


def _load_records(path: _pathlib.Path) -> list[_typing.Any]:
    """Load a list of records from a YAML or JSON file."""
    try:
        data = _yaml.safe_load(path.read_text(encoding="utf-8"))
    except _yaml.YAMLError as e:
        raise _click.ClickException(f"Cannot parse {path}: {e}") from e
    if data is None:
        return []
    if not isinstance(data, list):
        raise _click.ClickException(f"{path} must contain a list of records")
    return data


def _parse_key(text: str) -> _typing.Any:
    """Interpret a command line key as a YAML scalar (so 28041 is an int)."""
    try:
        value = _yaml.safe_load(text)
    except _yaml.YAMLError:
        return text
    return value if isinstance(value, (str, int, float, bool)) else text


def _build(
    ctx: _click.Context,
    path: _pathlib.Path,
    keys: tuple[str, ...],
    select: str | None,
    default: str | None,
    on_duplicate: str | None,
) -> core.Lookup:
    settings: config.Settings = ctx.obj["settings"]
    builder = core.from_source(_load_records(path), settings.build).by(*keys)
    if select:
        builder.select(select)
    if default is not None:
        builder.default_to(_parse_key(default))
    if on_duplicate:
        {
            "first": builder.use_first_on_duplicate,
            "last": builder.use_last_on_duplicate,
            "fail": builder.fail_on_duplicate,
        }[on_duplicate]()
    return builder.index()


def _print_result(result: _typing.Any, json_output: bool) -> None:
    if isinstance(result, core.Lookup):
        result = sorted(map(str, result.keys()))
    if json_output:
        _click.echo(_json.dumps(result, indent=2, default=str))
        return
    if isinstance(result, dict):
        table = _rich_table.Table(show_header=True, header_style="bold")
        table.add_column("Field")
        table.add_column("Value")
        for field, value in result.items():
            table.add_row(str(field), str(value))
        _rich_console.Console().print(table)
    elif isinstance(result, list):
        for item in result:
            _click.echo(item)
    else:
        _click.echo(result)


_build_options = [
    _click.argument(
        "path",
        type=_click.Path(exists=True, dir_okay=False, path_type=_pathlib.Path),
    ),
    _click.option(
        "--by",
        "keys",
        multiple=True,
        required=True,
        help="Key expression for one level (repeat for more levels, outermost first)",
    ),
    _click.option("--select", type=str, default=None, help="Expression for the stored value"),
    _click.option("--default", type=str, default=None, help="Value for missing keys"),
    _click.option(
        "--on-duplicate",
        type=_click.Choice(_DUPLICATE_CHOICES),
        default=None,
        help="Duplicate key policy (default from settings)",
    ),
]


def build_options(func: _typing.Callable[..., _typing.Any]) -> _typing.Callable[..., _typing.Any]:
    """Attach the options shared by commands that build a lookup."""
    for option in reversed(_build_options):
        func = option(func)
    return func


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(multilookup.__version__, "-v", "--version", prog_name="multilookup")
@_click.option("--verbose", is_flag=True, help="Enable debug logging")
@_click.pass_context
def cli(ctx: _click.Context, verbose: bool) -> None:
    """multilookup - multi-level indexes over YAML/JSON records."""
    settings = config.Settings()
    settings.configure_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@build_options
@_click.argument("lookup_keys", nargs=-1)
@_click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@_click.pass_context
def query(
    ctx: _click.Context,
    path: _pathlib.Path,
    keys: tuple[str, ...],
    select: str | None,
    default: str | None,
    on_duplicate: str | None,
    lookup_keys: tuple[str, ...],
    json_output: bool,
) -> None:
    """Look up LOOKUP_KEYS (one per level) in the records of PATH.

    With fewer keys than levels, lists the keys of the level reached.
    """
    if len(lookup_keys) > len(keys):
        raise _click.UsageError(f"Got {len(lookup_keys)} keys for {len(keys)} levels")

    try:
        result: _typing.Any = _build(ctx, path, keys, select, default, on_duplicate)
        for key in lookup_keys:
            result = result.get(_parse_key(key))
    except errors.LookupException as e:
        _click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    _print_result(result, json_output)


@cli.command(name="keys")
@build_options
@_click.pass_context
def keys_cmd(
    ctx: _click.Context,
    path: _pathlib.Path,
    keys: tuple[str, ...],
    select: str | None,
    default: str | None,
    on_duplicate: str | None,
) -> None:
    """List the top-level keys of the lookup built over PATH.

    Duplicate key tuples keep the first record unless --on-duplicate is
    given, since only the keys are shown.
    """
    try:
        result = _build(ctx, path, keys, select, default, on_duplicate or "first")
    except errors.LookupException as e:
        _click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    _print_result(result, json_output=False)


@cli.command(name="config")
@_click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@_click.pass_context
def config_cmd(ctx: _click.Context, json_output: bool) -> None:
    """Show the effective settings."""
    settings: config.Settings = ctx.obj["settings"]
    data = settings.model_dump(mode="json", include={"build", "logging"})
    if json_output:
        _click.echo(_json.dumps(data, indent=2))
    else:
        _click.echo(_yaml.safe_dump(data, sort_keys=False), nl=False)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
