"""Shared test fixtures and utilities."""

import subprocess
from typing import Dict, List, Optional, Tuple

import pytest

from autodocker.managers.engine import Engine

ENGINE_PATH = "/opt/fake/bin/docker"

DOCKER_HELP = """
Usage:  docker [OPTIONS] COMMAND

A self-sufficient runtime for containers

Common Commands:
  run         Create and run a new container from an image
  build       Build an image from a Dockerfile

Run 'docker COMMAND --help' for more information on a command.

For more help on how to use Docker, head to https://docs.docker.com/go/guides/
"""

IMAGE_LS_HEADER = "REPOSITORY          TAG                    IMAGE ID       CREATED        SIZE"


def image_ls_output(rows: List[Tuple[str, str]]) -> str:
    """Render rows of (repository, tag) the way `image ls` prints them."""
    lines = [IMAGE_LS_HEADER]
    for index, (repository, tag) in enumerate(rows):
        lines.append(f"{repository:<20}{tag:<23}{index:012x}   2 days ago     7.8MB")
    return "\n".join(lines) + "\n"


class FakeEngineProcess:
    """Stand-in for subprocess.run that records engine invocations."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.rows: List[Tuple[str, str]] = []
        self.username: Optional[str] = None
        self.help_text = DOCKER_HELP
        self.failures: Dict[Tuple[str, ...], int] = {}

    def __call__(self, cmd, **kwargs):
        cmd = list(cmd)
        self.calls.append(cmd)
        args = self.engine_args(cmd)

        for prefix, returncode in self.failures.items():
            if tuple(args[: len(prefix)]) == prefix:
                return subprocess.CompletedProcess(cmd, returncode, stdout="", stderr="engine failure\n")

        return subprocess.CompletedProcess(cmd, 0, stdout=self.output_for(args), stderr="")

    @staticmethod
    def engine_args(cmd: List[str]) -> List[str]:
        return cmd[cmd.index(ENGINE_PATH) + 1 :]

    def output_for(self, args: List[str]) -> str:
        if args[:2] == ["image", "ls"]:
            return image_ls_output(self.rows)
        if args[:1] == ["info"]:
            lines = ["Client:", " Context:    default", "Server:", " Containers: 0"]
            if self.username:
                lines.insert(3, f" Username: {self.username}")
            return "\n".join(lines) + "\n"
        if args[:1] == ["--help"]:
            return self.help_text
        return ""

    def add_tags(self, repository: str, *tags: str) -> None:
        self.rows.extend((repository, tag) for tag in tags)

    @property
    def engine_calls(self) -> List[List[str]]:
        return [self.engine_args(cmd) for cmd in self.calls]

    def calls_starting_with(self, *prefix: str) -> List[List[str]]:
        return [args for args in self.engine_calls if tuple(args[: len(prefix)]) == prefix]


@pytest.fixture
def fake_process(monkeypatch):
    """Replace subprocess.run and sudo lookup used by the engine wrapper."""
    fake = FakeEngineProcess()
    monkeypatch.setattr("autodocker.managers.engine.subprocess.run", fake)
    monkeypatch.setattr("autodocker.managers.engine.shutil.which", lambda name: f"/usr/bin/{name}")
    return fake


@pytest.fixture
def engine(fake_process):
    """Engine running as a regular user, so mutating calls go through sudo."""
    return Engine(ENGINE_PATH, "sudo", is_root=False)


@pytest.fixture
def root_engine(fake_process):
    """Engine running as root."""
    return Engine(ENGINE_PATH, "sudo", is_root=True)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point settings at the fake engine and away from the user's config file."""
    for name in ("AUTODOCKER_ELEVATE", "AUTODOCKER_LOG_LEVEL", "AUTODOCKER_DEFAULT_COMMAND", "AUTODOCKER_SHIM"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AUTODOCKER_ENGINE", ENGINE_PATH)
    monkeypatch.setenv("AUTODOCKER_CONFIG", str(tmp_path / "missing.env"))
    monkeypatch.setattr("autodocker.managers.engine.running_as_root", lambda: False)
    return tmp_path


@pytest.fixture
def app_dir(tmp_path):
    """A build context directory named `app`."""
    path = tmp_path / "app"
    path.mkdir()
    (path / "Dockerfile").write_text("FROM alpine\n")
    return path
