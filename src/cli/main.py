"""Main CLI entry point for the revue-check command.

This module provides the Typer application that authenticates against the
RevueCrafters API, runs the ordered CRUD scenario and reports the results.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.revue_client.config import load_config
from src.revue_client.errors import (
    APIAccessError,
    APIUnreachableError,
    AuthenticationError,
    ConfigurationError,
)
from src.scenario.context import open_context
from src.scenario.runner import run_scenario

__version__ = "0.1.0"

app = typer.Typer(
    name="revue-check",
    help="Run the RevueCrafters Revue CRUD checks against a live deployment.",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"revue-check_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _run_checks(base_url: Optional[str], output: OutputHandler) -> ExitCode:
    """Authenticate, run the scenario and map the outcome to an exit code."""
    try:
        config = load_config(base_url)
    except ConfigurationError as e:
        output.error(str(e))
        return ExitCode.GENERAL_ERROR

    output.info(f"Target: {config.base_url}")
    output.debug(f"Request timeout: {config.timeout}s")

    try:
        with open_context(config) as context:
            output.success("Authenticated")
            report = run_scenario(context, on_result=output.step_result)
    except AuthenticationError as e:
        logger.error(f"Authentication failed: {e}")
        output.error(str(e))
        return ExitCode.AUTH_ERROR
    except (APIUnreachableError, APIAccessError) as e:
        logger.error(f"API unavailable: {e}")
        output.error(str(e))
        return ExitCode.NETWORK_ERROR

    output.print_report(report)
    return ExitCode.SUCCESS if report.all_passed else ExitCode.CHECKS_FAILED


@app.command()
def main_command(
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Service root URL (overrides REVUE_BASE_URL)",
        metavar="URL",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Authenticate once, then create, list, edit and delete a revue.

    \b
    Credentials come from REVUE_EMAIL and REVUE_PASSWORD (or a .env file),
    falling back to the shared demo account.

    \b
    EXAMPLE:
      revue-check -v 1
      revue-check --base-url http://localhost:5000 --logdir ./logs
    """
    if version:
        typer.echo(f"revue-check version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        exit_code = _run_checks(base_url, output)
    except Exception as e:
        logger.exception("Unexpected error during checks")
        output.error(f"Unexpected error: {e}")
        exit_code = ExitCode.GENERAL_ERROR

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
