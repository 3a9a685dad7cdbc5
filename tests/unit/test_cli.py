from typing import TYPE_CHECKING, cast

import pytest
from cyclopts import App

from gitinfo.cli import CLIContext, ExitCode
from gitinfo.cli._commands import exit_with_error, register_commands
from gitinfo.config import Config, LogLevel

if TYPE_CHECKING:
    from pytest_mock import MockerFixture
    from rich.console import Console


class TestCommandRegistration:
    def test_register_commands_registers_subcommands(
        self, mocker: "MockerFixture"
    ) -> None:
        mock_app = mocker.MagicMock(spec=App)
        register_commands(mock_app)

        names = {
            call.kwargs["name"]
            for call in mock_app.command.call_args_list  # pyright: ignore[reportAny]
        }
        assert names == {
            "git-highest-working-copy-dir",
            "git-info",
            "tag",
            "branch-as-environment",
        }

    def test_every_command_has_short_alias(self, mocker: "MockerFixture") -> None:
        mock_app = mocker.MagicMock(spec=App)
        register_commands(mock_app)

        aliases = {
            cast("str", call.kwargs["alias"])
            for call in mock_app.command.call_args_list  # pyright: ignore[reportAny]
        }
        assert aliases == {"ghwc", "gi", "t", "b"}


class TestCLIContext:
    def test_get_current_defaults_when_unset(self) -> None:
        ctx = CLIContext.get_current()

        assert ctx.logger is None
        assert ctx.config.git.remote == "origin"

    def test_set_and_reset(self) -> None:
        ctx = CLIContext(config=Config())
        CLIContext.set_current(ctx)

        assert CLIContext.get_current() is ctx

        CLIContext.reset()

        assert CLIContext.get_current() is not ctx

    def test_command_logger_binds_command(self, mocker: "MockerFixture") -> None:
        logger = mocker.MagicMock()
        ctx = CLIContext(config=Config(), logger=logger)

        _ = ctx.command_logger("git-info")

        logger.bind.assert_called_once_with(command="git-info")

    def test_command_logger_built_from_config(self, mocker: "MockerFixture") -> None:
        create = mocker.patch("gitinfo.cli._commands._context.create_cli_logger")
        config = Config.from_dict({"logging": {"level": "debug"}})
        ctx = CLIContext(config=config)

        _ = ctx.command_logger("tag")

        create.assert_called_once_with(
            level=LogLevel.DEBUG.value,
            log_format="text",
            log_file="",
            command="tag",
        )


class TestExitWithError:
    def test_prints_and_exits(
        self, console: "Console", capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("boom [not markup]", ExitCode.TAG_ERROR, console=console)

        assert exc_info.value.code == ExitCode.TAG_ERROR
        assert "Error: boom [not markup]" in capsys.readouterr().out
