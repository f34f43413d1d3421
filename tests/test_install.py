"""Tests for installing the launcher script."""

import os
import stat
import subprocess

import pytest
from typer.testing import CliRunner

from autodocker.config import Settings
from autodocker.errors import ConfigError, InstallError, PrivilegeError
from autodocker.install import install_app, install_shim, render_shim


def test_render_shim(tmp_path):
    script = render_shim(tmp_path / "docker", "/usr/bin/python3")
    assert script.startswith("#!/bin/sh\n")
    assert f'export AUTODOCKER_SHIM="{tmp_path / "docker"}"' in script
    assert 'exec "/usr/bin/python3" -m autodocker "$@"' in script


def test_install_into_writable_directory(tmp_path):
    target = install_shim(str(tmp_path), "docker", Settings(engine="/usr/bin/docker"), python="/usr/bin/python3")

    assert target == tmp_path / "docker"
    assert "-m autodocker" in target.read_text()
    assert stat.S_IMODE(os.stat(target).st_mode) == 0o755


def test_install_refuses_to_replace_the_engine(tmp_path):
    engine = tmp_path / "docker"
    with pytest.raises(ConfigError):
        install_shim(str(tmp_path), "docker", Settings(engine=str(engine)))
    assert not engine.exists()


def test_missing_directory(tmp_path):
    with pytest.raises(InstallError):
        install_shim(str(tmp_path / "nope"), "docker", Settings())


class TestElevatedInstall:
    @pytest.fixture
    def readonly_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr("autodocker.install._is_writable", lambda directory: False)
        return tmp_path

    def test_uses_elevation_command(self, readonly_dir, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr("autodocker.install.shutil.which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr("autodocker.install.subprocess.run", fake_run)

        install_shim(str(readonly_dir), "docker", Settings(elevate="sudo"))

        [cmd] = calls
        assert cmd[:4] == ["sudo", "install", "-m", "0755"]
        assert cmd[-1] == str(readonly_dir / "docker")

    def test_elevation_failure(self, readonly_dir, monkeypatch):
        monkeypatch.setattr("autodocker.install.shutil.which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr("autodocker.install.subprocess.run", lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1))

        with pytest.raises(InstallError):
            install_shim(str(readonly_dir), "docker", Settings())

    def test_missing_elevation_command(self, readonly_dir, monkeypatch):
        monkeypatch.setattr("autodocker.install.shutil.which", lambda name: None)

        with pytest.raises(PrivilegeError):
            install_shim(str(readonly_dir), "docker", Settings())


def test_install_command(tmp_path, monkeypatch):
    monkeypatch.setenv("AUTODOCKER_CONFIG", str(tmp_path / "missing.env"))
    monkeypatch.setenv("AUTODOCKER_ENGINE", "/usr/bin/docker")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    result = CliRunner().invoke(install_app, ["--dest", str(bin_dir), "--name", "docker"])

    assert result.exit_code == 0, result.output
    assert (bin_dir / "docker").exists()


def test_install_command_reports_errors(tmp_path, monkeypatch):
    monkeypatch.setenv("AUTODOCKER_CONFIG", str(tmp_path / "missing.env"))
    monkeypatch.setenv("AUTODOCKER_ENGINE", str(tmp_path / "docker"))

    result = CliRunner().invoke(install_app, ["--dest", str(tmp_path)])

    assert result.exit_code == 1
    assert "resolves to this program" in result.output
