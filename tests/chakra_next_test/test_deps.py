"""Unit tests for dependency detection and installation."""

import subprocess
from unittest.mock import patch

import pytest

from chakra_next.deps import (
    INSTALL_PACKAGES,
    InstallError,
    PackageManager,
    build_install_command,
    detect_package_manager,
    ensure_chakra_installed,
    install_chakra,
    is_chakra_installed,
)


class TestIsChakraInstalled:
    def test_missing(self, tmp_path):
        assert not is_chakra_installed(tmp_path)

    def test_in_project(self, tmp_path, make_chakra_install):
        make_chakra_install(tmp_path)
        assert is_chakra_installed(tmp_path)

    def test_in_parent_directory(self, tmp_path, make_chakra_install):
        make_chakra_install(tmp_path)
        nested = tmp_path / "apps" / "web"
        nested.mkdir(parents=True)
        assert is_chakra_installed(nested)

    def test_directory_without_manifest_does_not_count(self, tmp_path):
        (tmp_path / "node_modules" / "@chakra-ui" / "react").mkdir(parents=True)
        assert not is_chakra_installed(tmp_path)

    def test_defaults_to_cwd(self, tmp_path, monkeypatch, make_chakra_install):
        make_chakra_install(tmp_path)
        monkeypatch.chdir(tmp_path)
        assert is_chakra_installed()


class TestDetectPackageManager:
    def test_npm_by_default(self, tmp_path):
        assert detect_package_manager(tmp_path) is PackageManager.NPM

    def test_yarn(self, tmp_path):
        (tmp_path / "yarn.lock").write_text("")
        assert detect_package_manager(tmp_path) is PackageManager.YARN

    def test_pnpm(self, tmp_path):
        (tmp_path / "pnpm-lock.yaml").write_text("")
        assert detect_package_manager(tmp_path) is PackageManager.PNPM

    def test_yarn_wins_over_pnpm(self, tmp_path):
        (tmp_path / "yarn.lock").write_text("")
        (tmp_path / "pnpm-lock.yaml").write_text("")
        assert detect_package_manager(tmp_path) is PackageManager.YARN

    def test_uses_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "pnpm-lock.yaml").write_text("")
        monkeypatch.chdir(tmp_path)
        assert detect_package_manager() is PackageManager.PNPM


class TestBuildInstallCommand:
    @pytest.mark.parametrize(
        "manager,prefix",
        [
            (PackageManager.NPM, ["npm", "install"]),
            (PackageManager.YARN, ["yarn", "add"]),
            (PackageManager.PNPM, ["pnpm", "add"]),
        ],
    )
    def test_command(self, manager, prefix):
        assert build_install_command(manager) == [*prefix, *INSTALL_PACKAGES]

    def test_installs_peer_dependencies(self):
        assert INSTALL_PACKAGES == [
            "@chakra-ui/react",
            "@emotion/react",
            "@emotion/styled",
            "framer-motion",
        ]


class TestInstallChakra:
    def test_runs_with_inherited_stdio(self, tmp_path, capsys):
        (tmp_path / "yarn.lock").write_text("")
        with patch("chakra_next.deps.subprocess.run") as run:
            install_chakra(tmp_path)

        run.assert_called_once_with(
            ["yarn", "add", *INSTALL_PACKAGES], check=True, cwd=tmp_path
        )
        assert "successfully installed" in capsys.readouterr().out

    def test_non_zero_exit_raises(self, tmp_path):
        error = subprocess.CalledProcessError(1, ["npm", "install"])
        with patch("chakra_next.deps.subprocess.run", side_effect=error):
            with pytest.raises(InstallError, match="exit status 1"):
                install_chakra(tmp_path)

    def test_missing_executable_raises(self, tmp_path):
        (tmp_path / "pnpm-lock.yaml").write_text("")
        with patch(
            "chakra_next.deps.subprocess.run",
            side_effect=FileNotFoundError("No such file or directory: 'pnpm'"),
        ):
            with pytest.raises(InstallError, match="pnpm not found"):
                install_chakra(tmp_path)


class TestEnsureChakraInstalled:
    def test_already_installed_skips_install(self, tmp_path, make_chakra_install):
        make_chakra_install(tmp_path)
        with patch("chakra_next.deps.install_chakra") as install:
            assert ensure_chakra_installed(tmp_path) is True
        install.assert_not_called()

    def test_installs_when_missing(self, tmp_path, capsys):
        with patch("chakra_next.deps.install_chakra") as install:
            assert ensure_chakra_installed(tmp_path) is False
        install.assert_called_once_with(tmp_path)
        assert "Chakra UI is not installed. Installing..." in capsys.readouterr().out

    def test_install_error_propagates(self, tmp_path):
        with patch(
            "chakra_next.deps.install_chakra", side_effect=InstallError("boom")
        ):
            with pytest.raises(InstallError):
                ensure_chakra_installed(tmp_path)
