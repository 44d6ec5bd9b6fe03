"""The command-line interface for SuperHeader."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from superheader.config import safe_load_config
from superheader.utils import create_logger

from ._commands import register_commands
from ._context import CLIContext

APP_NAME = "superheader"
APP_HELP = "Resolve record-aware page header templates."


def _run_with_context(
    app: App,
    tokens: tuple[str, ...],
    config: Path | None,
) -> None:
    loaded_config, config_error = safe_load_config(config_path=config)

    logger = create_logger(
        level=loaded_config.logging.level.value,
        log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
        log_file=loaded_config.logging.file,
    )

    if config_error is not None:
        logger.warning("config_load_failed", error=config_error)

    CLIContext.set_current(CLIContext(config=loaded_config, logger=logger))
    try:
        app(tokens)
    finally:
        CLIContext.reset()


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the CLI app.

    Args:
        console: Console for help and cyclopts output.
        error_console: Console for cyclopts error output.
        exit_on_error: Exit instead of raising on parse errors.

    Returns:
        A configured cyclopts App with all commands registered.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name=APP_NAME,
        help=APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Launch the SuperHeader CLI with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            config: Explicit path to config file.
        """
        _run_with_context(app, tokens, config)

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `superheader` CLI."""
    app = create_app()
    app.meta()


if __name__ == "__main__":
    main()
