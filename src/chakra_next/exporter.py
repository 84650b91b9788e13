"""Writing re-export files for Chakra UI components."""

from pathlib import Path

import click
from loguru import logger
from pydantic import BaseModel, Field

from chakra_next.families import get_component_family

UI_PACKAGE = "@chakra-ui/react"
CLIENT_DIRECTIVE = "'use client'"

ALLOWED_EXTENSIONS = ("tsx", "jsx")
DEFAULT_EXTENSION = "tsx"


class ExportResult(BaseModel):
    """Outcome of exporting a single component file."""

    component: str = Field(description="Requested component name")
    members: list[str] = Field(description="Names re-exported in the file")
    path: Path = Field(description="Path of the written file")


def normalize_extension(extension: str | None) -> str:
    """Map the requested extension to ``jsx`` or, for anything else, ``tsx``."""
    if extension == "jsx":
        return "jsx"
    return DEFAULT_EXTENSION


def ensure_output_dir(output_dir: str | Path) -> Path:
    """Resolve *output_dir* to an absolute path and create it if missing."""
    path = Path(output_dir).resolve()
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created directory: {path}")
        click.echo(f"Created directory: {path}")
    return path


def render_export(members: list[str]) -> str:
    """Build the file body re-exporting *members* from the UI package."""
    names = ", ".join(members)
    return f"{CLIENT_DIRECTIVE}\n\nexport {{ {names} }} from '{UI_PACKAGE}'\n"


def export_component(
    component_name: str, output_dir: Path, extension: str
) -> ExportResult:
    """Write ``<output_dir>/<component_name>.<extension>``.

    Any existing file at that path is overwritten.

    Args:
        component_name: A validated component name
        output_dir: Existing directory to write into
        extension: ``tsx`` or ``jsx``

    Returns:
        ExportResult describing the written file
    """
    members = get_component_family(component_name)
    file_path = Path(output_dir) / f"{component_name}.{extension}"

    # newline="" keeps the "\n" line endings identical on every platform
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(render_export(members))

    logger.info(f"Exported {len(members)} name(s) for {component_name} to {file_path}")
    click.echo(f"Exported {', '.join(members)} to {file_path}")
    return ExportResult(component=component_name, members=members, path=file_path)
