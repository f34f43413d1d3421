"""Tests for routing command lines to overrides or the engine."""

import pytest

from autodocker.commands.dispatcher import Dispatcher, wants_help
from autodocker.commands.overrides import OverrideCommands, build_registry
from autodocker.commands.registry import CommandDefinition, CommandRegistry
from autodocker.errors import UsageError

from .conftest import ENGINE_PATH


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))
        return 0


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def dispatcher(engine, recorder):
    registry = CommandRegistry(
        [
            CommandDefinition("autobuild", recorder, "build", "autobuild long help"),
            CommandDefinition("help", lambda args: 0, "help", "help long help"),
        ]
    )
    return Dispatcher(registry, engine)


def test_wants_help():
    assert wants_help(["x", "--help"])
    assert not wants_help(["-h", "hostname"])
    assert not wants_help([])


class TestOverrides:
    def test_registered_command_runs_locally(self, dispatcher, recorder, fake_process):
        assert dispatcher.dispatch(["autobuild", "/tmp/app"]) == 0
        assert recorder.calls == [["/tmp/app"]]
        assert fake_process.calls == []

    def test_help_flag_anywhere_redirects_to_long_help(self, engine, recorder, fake_process, capsys):
        dispatcher = Dispatcher(build_registry(OverrideCommands(engine)), engine)

        assert dispatcher.dispatch(["autoprune", "/tmp/app", "--help", "xyz"]) == 0

        assert "Usage:  docker autoprune PATH [METHOD]" in capsys.readouterr().out
        assert fake_process.calls == []

    def test_help_flag_does_not_invoke_handler(self, dispatcher, recorder):
        dispatcher.dispatch(["autobuild", "--help"])
        assert recorder.calls == []

    def test_usage_error_is_reported_with_long_help(self, engine, capsys):
        def failing(args):
            raise UsageError("autobuild", "bad arguments")

        registry = CommandRegistry([CommandDefinition("autobuild", failing, "build", "autobuild long help")])
        dispatcher = Dispatcher(registry, engine)

        assert dispatcher.run(["autobuild"]) == 1
        err = capsys.readouterr().err
        assert "bad arguments" in err
        assert "autobuild long help" in err


class TestPassthrough:
    def test_unknown_command_is_forwarded_verbatim_with_sudo(self, dispatcher, fake_process):
        argv = ["run", "--rm", "-it", "alpine", "sh", "-c", "echo hi", "--", "x"]

        dispatcher.dispatch(argv)

        assert fake_process.calls == [["sudo", ENGINE_PATH, *argv]]

    def test_engine_exit_status_is_returned(self, dispatcher, fake_process):
        fake_process.failures[("pull",)] = 18
        assert dispatcher.dispatch(["pull", "alpine"]) == 18

    def test_builtin_help_is_not_elevated(self, engine, fake_process):
        dispatcher = Dispatcher(CommandRegistry(), engine)
        dispatcher.dispatch(["help", "run"])
        assert fake_process.calls == [[ENGINE_PATH, "help", "run"]]

    def test_help_flag_is_not_elevated(self, dispatcher, fake_process):
        dispatcher.dispatch(["image", "ls", "--help"])
        assert fake_process.calls == [[ENGINE_PATH, "image", "ls", "--help"]]

    def test_top_level_help_flag_is_not_elevated(self, engine, fake_process):
        dispatcher = Dispatcher(CommandRegistry(), engine)
        dispatcher.dispatch(["--help"])
        assert fake_process.calls == [[ENGINE_PATH, "--help"]]

    def test_root_is_not_elevated(self, root_engine, recorder, fake_process):
        dispatcher = Dispatcher(CommandRegistry(), root_engine)
        dispatcher.dispatch(["ps", "-a"])
        assert fake_process.calls == [[ENGINE_PATH, "ps", "-a"]]
        assert dispatcher.needs_elevation("ps", ["-a"]) is False

    def test_short_h_flag_still_elevates(self, dispatcher):
        assert dispatcher.needs_elevation("run", ["-h", "myhost", "alpine"]) is True


class TestDefaultCommand:
    def test_empty_command_line_uses_help(self, engine, fake_process, capsys):
        dispatcher = Dispatcher(build_registry(OverrideCommands(engine)), engine)

        assert dispatcher.dispatch([]) == 0

        assert "Overwritten commands:" in capsys.readouterr().out
        assert fake_process.calls == [[ENGINE_PATH, "--help"]]

    def test_configured_default_command(self, engine, recorder):
        registry = CommandRegistry([CommandDefinition("autobuild", recorder, "build", "long")])
        Dispatcher(registry, engine, default_command="autobuild").dispatch([])
        assert recorder.calls == [[]]


class TestHelpCommand:
    @pytest.fixture
    def full_dispatcher(self, engine):
        return Dispatcher(build_registry(OverrideCommands(engine)), engine)

    def test_help_for_override(self, full_dispatcher, fake_process, capsys):
        full_dispatcher.dispatch(["help", "autorun"])
        assert "Usage:  docker autorun PATH METHOD [ARG...]" in capsys.readouterr().out
        assert fake_process.calls == []

    def test_help_for_engine_command_is_forwarded_unelevated(self, full_dispatcher, fake_process):
        full_dispatcher.dispatch(["help", "run"])
        assert fake_process.calls == [[ENGINE_PATH, "help", "run"]]

    def test_help_help(self, full_dispatcher, capsys):
        full_dispatcher.dispatch(["help", "--help"])
        assert "Usage:  docker help [COMMAND]" in capsys.readouterr().out
