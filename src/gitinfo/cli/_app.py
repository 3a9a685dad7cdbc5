"""The command-line interface for gitinfo."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from gitinfo.config import safe_load_config
from gitinfo.utils import create_cli_logger

from ._commands import CLIContext, register_commands

_HELP = "Information about the highest git working copy above a path."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the gitinfo CLI app.

    Global options are handled by the meta app, which loads the
    configuration and sets the CLIContext before dispatching to a command.
    Run ``app.meta(tokens)`` to go through it.

    Args:
        console: Console for regular cyclopts output.
        error_console: Console for cyclopts parse errors.
        exit_on_error: Whether cyclopts exits on parse errors.

    Returns:
        The configured App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitinfo",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable debug logging")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Launch gitinfo CLI with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable debug logging.
            config: Explicit path to config file.
        """
        cli_overrides: dict[str, object] | None = None
        if verbose:
            cli_overrides = {"logging": {"level": "debug"}}

        loaded_config, config_error = safe_load_config(
            config_path=config,
            cli_overrides=cli_overrides,
        )

        cli_logger = create_cli_logger(
            level=loaded_config.logging.level.value,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            log_file=loaded_config.logging.file,
        )

        cli_logger.debug(
            "config_loaded",
            config_path=str(config) if config is not None else None,
            error=config_error,
        )

        ctx = CLIContext(config=loaded_config, logger=cli_logger)
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `gitinfo` CLI."""
    app = create_app()
    app.meta()


if __name__ == "__main__":
    main()
