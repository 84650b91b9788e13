import click

from chakra_next import logger
from chakra_next.config import create_default_config, get_config_file, load_config
from chakra_next.deps import InstallError, ensure_chakra_installed
from chakra_next.exporter import (
    ALLOWED_EXTENSIONS,
    ensure_output_dir,
    export_component,
    normalize_extension,
)
from chakra_next.families import COMPONENT_FAMILIES
from chakra_next.naming import prompt_for_component_name, resolve_component_name
from chakra_next.ui.table import export_summary_table, family_table, render
from chakra_next.utils.logger import enable_console_logging, setup_logger

setup_logger()


def _init_config() -> None:
    """Write ~/.chakra-next/config.toml unless it already exists."""
    config_file = get_config_file()
    if config_file.exists():
        click.echo(f"⚠️  Config file already exists: {config_file}")
        return
    try:
        create_default_config()
    except Exception as e:
        click.echo(f"❌ Failed to create config file: {e}", err=True)
        logger.error(f"Config init failed: {e}")
        raise click.exceptions.Exit(1)
    click.echo(f"✓ Created configuration file: {config_file}")


@click.command("chakra-next")
@click.argument("components", nargs=-1)
@click.option(
    "-o",
    "--output",
    "output",
    default=None,
    help="Output directory for component files  [default: components/ui]",
)
@click.option(
    "-e",
    "--extension",
    "extension",
    default=None,
    help=f"File extension for component files ({' or '.join(ALLOWED_EXTENSIONS)})",
)
@click.option(
    "--skip-install",
    is_flag=True,
    default=False,
    help="Do not check for or install @chakra-ui/react.",
)
@click.option(
    "--list-families",
    is_flag=True,
    default=False,
    help="Show the known component families and exit.",
)
@click.option(
    "--init-config",
    is_flag=True,
    default=False,
    help="Create ~/.chakra-next/config.toml with the default settings and exit.",
)
@click.option("-v", "--verbose", is_flag=True, help="Print debug logging to stderr.")
def main(
    components: tuple[str, ...],
    output: str | None,
    extension: str | None,
    skip_install: bool,
    list_families: bool,
    init_config: bool,
    verbose: bool,
) -> None:
    """Export Chakra UI components to separate files with a top-level
    'use client' directive, making them usable with the Next.js App Router.

    \b
    Examples:
      chakra-next Menu Modal
      chakra-next Button -o src/components/ui -e jsx
    """
    if verbose:
        sink_id = enable_console_logging()
        click.get_current_context().call_on_close(lambda: logger.remove(sink_id))

    if init_config:
        _init_config()
        return

    if list_families:
        render(family_table(COMPONENT_FAMILIES))
        return

    config = load_config()
    if not (skip_install or config.skip_install):
        try:
            ensure_chakra_installed()
        except InstallError as e:
            click.echo(f"Failed to install Chakra UI: {e}", err=True)
            logger.error(f"Chakra UI install failed: {e}")
            raise click.exceptions.Exit(1)

    output_dir = ensure_output_dir(
        output if output is not None else config.output_dir
    )
    file_extension = normalize_extension(
        extension if extension is not None else config.extension
    )

    requested = list(components)
    if not requested:
        requested.append(prompt_for_component_name())

    results = []
    for component in requested:
        component_name = resolve_component_name(component)
        results.append(export_component(component_name, output_dir, file_extension))

    if len(results) > 1:
        render(export_summary_table(results))
