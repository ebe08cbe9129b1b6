"""Console output for the CLI."""
import logging
import sys

import click
from colorama import Fore, Style

LEVEL_COLORS = {
    logging.DEBUG: Fore.WHITE,
    logging.INFO: Fore.CYAN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED,
}


class ColorFormatter(logging.Formatter):
    """Prefix log lines with a colour matching their level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{message}{Style.RESET_ALL}"


class ClickHandler(logging.Handler):
    """Send log records to stderr through click.echo so CliRunner can capture them."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(level: str = "INFO") -> None:
    """Route the webhook_action loggers to the console."""
    handler = ClickHandler()
    handler.setFormatter(ColorFormatter("%(message)s"))

    root = logging.getLogger("webhook_action")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False


def print_error(message: str) -> None:
    """Print a fatal error message."""
    click.echo(f"{Fore.RED}❌ {message}{Style.RESET_ALL}", err=True)


def print_banner() -> None:
    """Print application banner."""
    if not sys.stdout.isatty():
        return
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Discord Webhook Action{Fore.CYAN}               ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
