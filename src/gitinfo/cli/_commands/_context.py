# pyright: reportUnusedCallResult=false
"""CLI context for global state management.

The CLIContext is set once by the meta app at CLI startup and made
available to all commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gitinfo.config import Config
from gitinfo.utils import create_cli_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_current_cli_context: "contextvars.ContextVar[CLIContext | None]" = (  # noqa: UP037
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        logger: Structured logger for CLI commands.
    """

    config: Config = field(repr=False)
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)  # noqa: UP037

    def command_logger(self, command: str) -> "FilteringBoundLogger":  # noqa: UP037
        """Return the context logger bound to ``command``.

        A logger is created from the logging config when none was set.
        """
        if self.logger is not None:
            return self.logger.bind(command=command)
        logging_config = self.config.logging
        return create_cli_logger(
            level=logging_config.level.value,
            log_format=logging_config.format.value,  # type: ignore[arg-type]
            log_file=logging_config.file,
            command=command,
        )

    @classmethod
    def get_current(cls) -> "CLIContext":  # noqa: UP037
        """Get current active CLIContext, or create a default if not set.

        Returns:
            The currently active CLIContext, or a default instance if none is set.
        """
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:  # noqa: UP037
        """Set the current active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _current_cli_context.set(None)
