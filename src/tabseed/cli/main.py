"""CLI commands for tabseed."""

import logging
import sys
from pathlib import Path

import click

from tabseed.command import generate_csv
from tabseed.config import CONFIG_FILENAME, Config
from tabseed.exceptions import TabseedError
from tabseed.fields import decode_fields, load_fields_file
from tabseed.generators.faker_generator import configure_faker
from tabseed.generators.registry import active_registry
from tabseed.models import CSVOptions, RowCountMode


def _load_config(config_path: str | None) -> Config:
    if config_path:
        return Config.from_toml(config_path)
    return Config.load_or_default()


def _fail(message: object) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="tabseed")
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False),
    help=f"Path to {CONFIG_FILENAME} (default: search from current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """tabseed - synthetic CSV/TSV data from named generator functions."""
    try:
        config = _load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.logging.level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@cli.command()
@click.option("--rowcount", "-n", type=int, help="Requested row count (default from config: 100)")
@click.option("--field", "-f", "field_json", multiple=True,
              help='Field as JSON, e.g. \'{"name": "id", "function": "autoincrement"}\'')
@click.option("--fields-file", type=click.Path(dir_okay=False),
              help="JSON or YAML file listing fields")
@click.option("--delimiter", "-d", help="',' or 'tab' (default from config: ',')")
@click.option("--exact", is_flag=True, help="Emit exactly --rowcount body rows")
@click.option("--seed", type=int, help="Faker seed for reproducible output")
@click.option("--locale", help="Faker locale, e.g. fr_FR")
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True),
              help="Write to file instead of stdout")
@click.pass_obj
def csv(
    config: Config,
    rowcount: int | None,
    field_json: tuple[str, ...],
    fields_file: str | None,
    delimiter: str | None,
    exact: bool,
    seed: int | None,
    locale: str | None,
    output: str | None,
) -> None:
    """Generate a delimited table."""
    try:
        configure_faker(
            locale=locale or config.faker.locale,
            seed=seed if seed is not None else config.faker.seed,
        )

        fields = load_fields_file(fields_file) if fields_file else []
        fields.extend(decode_fields(field_json))

        options = CSVOptions(
            delimiter=delimiter if delimiter is not None else config.output.delimiter,
            row_count=rowcount if rowcount is not None else config.output.row_count,
            fields=fields,
            row_count_mode=RowCountMode.EXACT if exact else config.output.row_count_mode,
        )
        data = generate_csv(options)
    except (TabseedError, FileNotFoundError) as e:
        _fail(e)

    if output:
        Path(output).write_bytes(data)
        click.echo(f"✓ Wrote {len(data)} bytes to {output}", err=True)
    else:
        click.echo(data, nl=False)


@cli.command(name="list")
@click.option("--category", "-c", help="Only show one category")
def list_functions(category: str | None) -> None:
    """List available generator functions."""
    grouped = active_registry().categories()

    if category is not None:
        if category not in grouped:
            _fail(f"Unknown category '{category}'. Available: {', '.join(sorted(grouped))}")
        grouped = {category: grouped[category]}

    for name in sorted(grouped):
        click.echo(f"{name}:")
        for function in grouped[name]:
            click.echo(f"  {function}")


@cli.command()
@click.argument("name")
def info(name: str) -> None:
    """Show a generator function's description and parameters."""
    generator = active_registry().get(name)
    if generator is None:
        _fail(f"Invalid function, {name} does not exist")

    meta = getattr(generator, "info", None)
    if meta is None:
        click.echo(f"{name}: (no metadata)")
        return

    click.echo(f"{name} - {meta.display}")
    click.echo(f"  category:    {meta.category}")
    click.echo(f"  description: {meta.description}")
    click.echo(f"  output:      {meta.output}")
    if meta.example:
        click.echo("  example:")
        for line in meta.example.splitlines():
            click.echo(f"    {line}")
    if meta.params:
        click.echo("  params:")
        for param in meta.params:
            default = f" (default: {param.default!r})" if param.default is not None else ""
            click.echo(f"    {param.field} [{param.type}]{default} {param.description}".rstrip())


@cli.command()
@click.option("--force", is_flag=True, help=f"Overwrite an existing {CONFIG_FILENAME}")
@click.argument("directory", type=click.Path(file_okay=False), default=".")
def init(force: bool, directory: str) -> None:
    """Write a default tabseed.toml."""
    path = Path(directory) / CONFIG_FILENAME
    if path.exists() and not force:
        _fail(f"{path} already exists (use --force to overwrite)")

    Config().to_toml(path)
    click.echo(f"✓ Created {path}")


if __name__ == "__main__":
    cli()
