"""Detecting and installing the Chakra UI dependency set."""

import subprocess
from enum import Enum
from pathlib import Path

import click
from loguru import logger

from chakra_next.exporter import UI_PACKAGE

# Chakra UI and its peer dependencies
INSTALL_PACKAGES: list[str] = [
    UI_PACKAGE,
    "@emotion/react",
    "@emotion/styled",
    "framer-motion",
]


class InstallError(Exception):
    """Raised when the package manager fails to install the dependency set."""


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def install_command(self) -> list[str]:
        return {
            PackageManager.NPM: ["npm", "install"],
            PackageManager.YARN: ["yarn", "add"],
            PackageManager.PNPM: ["pnpm", "add"],
        }[self]


def is_chakra_installed(start: Path | None = None) -> bool:
    """Check whether @chakra-ui/react resolves from *start* (default: cwd).

    Follows Node's lookup: every ``node_modules`` from the directory up to
    the filesystem root is searched.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate in (directory, *directory.parents):
        manifest = candidate / "node_modules" / UI_PACKAGE / "package.json"
        if manifest.is_file():
            logger.debug(f"Found {UI_PACKAGE} at {manifest.parent}")
            return True
    return False


def detect_package_manager(cwd: Path | None = None) -> PackageManager:
    """Pick the package manager from the lockfile present in *cwd*."""
    directory = cwd or Path.cwd()
    if (directory / "yarn.lock").exists():
        return PackageManager.YARN
    if (directory / "pnpm-lock.yaml").exists():
        return PackageManager.PNPM
    return PackageManager.NPM


def build_install_command(manager: PackageManager) -> list[str]:
    """Full argv installing INSTALL_PACKAGES with *manager*."""
    return [*manager.install_command, *INSTALL_PACKAGES]


def install_chakra(cwd: Path | None = None) -> None:
    """Install Chakra UI with the detected package manager.

    The child process shares this process's stdin/stdout/stderr.

    Raises:
        InstallError: If the command is missing or exits non-zero
    """
    manager = detect_package_manager(cwd)
    args = build_install_command(manager)
    logger.info(f"Installing Chakra UI with {manager.value}: {' '.join(args)}")

    try:
        subprocess.run(args, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        raise InstallError(
            f"Command failed: {' '.join(args)} (exit status {e.returncode})"
        ) from e
    except FileNotFoundError as e:
        raise InstallError(f"{manager.value} not found: {e}") from e

    click.echo("Chakra UI has been successfully installed.")


def ensure_chakra_installed(cwd: Path | None = None) -> bool:
    """Install Chakra UI unless it already resolves.

    Returns:
        True if it was already installed, False if it had to be installed
    """
    if is_chakra_installed(cwd):
        return True
    click.echo("Chakra UI is not installed. Installing...")
    install_chakra(cwd)
    return False
