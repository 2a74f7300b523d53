"""Wire the application for CLI commands and translate its errors.

Domain and lookup failures become ``click.ClickException`` so the user sees a
one-line message and exit status 1 instead of a traceback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click
from sqlalchemy.exc import OperationalError

from circulation import config
from circulation.bootstrap import AppContainer, bootstrap
from circulation.domain.errors import DomainError
from circulation.interfaces.repositories import RepositoryError
from circulation.service_layer.errors import NotFoundError

if TYPE_CHECKING:
    from circulation.service_layer.commands import Command

logger = logging.getLogger(__name__)

MISSING_DB_URL_MSG = (
    f"{config.DB_URL_ENV_VAR} is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    f"  export {config.DB_URL_ENV_VAR}='sqlite:///circulation.db'\n"
    "  or in PowerShell:\n"
    f"  $env:{config.DB_URL_ENV_VAR}='sqlite:///circulation.db'"
)

DATABASE_ERROR_MSG = (
    "The database could not be used: {detail}\n"
    "Run 'circulation db status' to check the connection and schema."
)


def load_container() -> AppContainer:
    """Bootstrap against the database named by `CIRCULATION_DB_URL`."""
    try:
        return bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e


def run_command(cmd: Command, container: AppContainer | None = None) -> Any:
    """Dispatch `cmd` on the message bus and return the handler's view.

    Raises:
        click.ClickException: If the command is rejected or the database
            cannot be used.
    """
    container = container if container is not None else load_container()
    try:
        return container.message_bus.handle(cmd)
    except (NotFoundError, DomainError, RepositoryError) as e:
        raise click.ClickException(str(e)) from e
    except OperationalError as e:
        raise click.ClickException(
            DATABASE_ERROR_MSG.format(detail=e.orig or e)
        ) from e
