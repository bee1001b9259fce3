"""Shared helpers for CLI commands."""

import functools
import sys

from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import click

from src.common.logging import get_logger
from src.domain.services.interfaces.electoral_gateway import ElectoralGatewayError


logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Turn failures of a command into a message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except ElectoralGatewayError as e:
            logger.warning("Electoral API call failed", status_code=e.status_code)
            detail = f" ({e.detail})" if e.detail else ""
            BaseCommand.error(f"{e}{detail}", exit_code=1)
        except Exception as e:
            logger.exception("Command failed", command=func.__name__)
            BaseCommand.error(str(e), exit_code=1)

    return wrapper  # type: ignore[return-value]


class BaseCommand:
    """Output helpers shared by command classes."""

    @staticmethod
    def echo_info(message: str) -> None:
        click.echo(message)

    @staticmethod
    def echo_success(message: str) -> None:
        click.secho(message, fg="green")

    @staticmethod
    def echo_warning(message: str) -> None:
        click.secho(message, fg="yellow")

    @staticmethod
    def echo_error(message: str) -> None:
        click.secho(message, fg="red", err=True)

    @staticmethod
    def show_progress(message: str) -> None:
        click.echo(f"⏳ {message}")

    @staticmethod
    def success(message: str) -> None:
        click.secho(f"✓ {message}", fg="green")

    @staticmethod
    def error(message: str, exit_code: int = 1) -> NoReturn:
        click.secho(f"Error: {message}", fg="red", err=True)
        sys.exit(exit_code)
