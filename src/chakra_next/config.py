"""Configuration for default export settings."""

import os
import tomllib
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field

DEFAULT_OUTPUT_DIR = "components/ui"

_TRUTHY = {"1", "true", "yes", "on"}


class ExportConfig(BaseModel):
    """Defaults applied when an option is not given on the command line."""

    output_dir: str = Field(
        DEFAULT_OUTPUT_DIR, description="Directory the component files go into"
    )
    extension: str = Field("tsx", description="File extension (tsx or jsx)")
    skip_install: bool = Field(
        False, description="Skip the Chakra UI dependency check"
    )


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    return Path.home() / ".chakra-next"


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / "config.toml"


def load_config() -> ExportConfig:
    """
    Load export defaults from environment variables and the config file.

    Precedence order:
    1. CHAKRA_NEXT_OUTPUT / CHAKRA_NEXT_EXTENSION / CHAKRA_NEXT_SKIP_INSTALL
    2. ``[export]`` section of ~/.chakra-next/config.toml
    3. Built-in defaults

    A config file that cannot be read or holds invalid values is logged and
    ignored as a whole; environment variables still apply.
    """
    values: dict[str, object] = {}

    config_file = get_config_file()
    if config_file.exists():
        try:
            with open(config_file, "rb") as f:
                config_data = tomllib.load(f)
            export_section = config_data.get("export", {})
            file_values = {
                key: export_section[key]
                for key in ExportConfig.model_fields
                if key in export_section
            }
            ExportConfig(**file_values)
            values.update(file_values)
            logger.debug(f"Loaded config from {config_file}")
        except Exception as e:
            logger.warning(f"Failed to load config file: {e}")

    output_dir = os.getenv("CHAKRA_NEXT_OUTPUT")
    if output_dir:
        values["output_dir"] = output_dir

    extension = os.getenv("CHAKRA_NEXT_EXTENSION")
    if extension:
        values["extension"] = extension

    skip_install = os.getenv("CHAKRA_NEXT_SKIP_INSTALL")
    if skip_install is not None:
        values["skip_install"] = skip_install.strip().lower() in _TRUTHY

    return ExportConfig(**values)


def create_default_config() -> None:
    """Create a default configuration file with example settings."""
    config_file = get_config_file()

    if config_file.exists():
        logger.warning(f"Config file already exists at {config_file}")
        return

    default_content = f"""# chakra-next configuration

[export]
# Directory the generated component files are written to
output_dir = "{DEFAULT_OUTPUT_DIR}"

# File extension for generated files: "tsx" or "jsx"
extension = "tsx"

# Set to true to never check for or install @chakra-ui/react
skip_install = false
"""

    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(default_content)
    logger.info(f"Created default config file at {config_file}")
