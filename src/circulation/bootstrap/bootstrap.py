"""Bootstrap the message bus, circulation desk and unit of work."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from circulation import config
from circulation.adapters.db.engine import make_engine
from circulation.adapters.event_publisher import InProcessEventPublisher
from circulation.adapters.id_generators import TimeOrderedUUIDGenerator
from circulation.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from circulation.domain.events import BookCheckedOut, HoldPlaced
from circulation.service_layer.circulation_desk import CirculationDesk
from circulation.service_layer.handlers import COMMAND_HANDLERS
from circulation.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from circulation.interfaces.id_generator import IdGenerator
    from circulation.interfaces.unit_of_work import AbstractUnitOfWork
    from circulation.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    desk: CirculationDesk


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work for write operations."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_desk(
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator | None = None,
    publisher: InProcessEventPublisher | None = None,
) -> CirculationDesk:
    """Build a circulation desk subscribed to the hold events it reacts to."""
    publisher = publisher if publisher is not None else InProcessEventPublisher()
    desk = CirculationDesk(
        uow,
        publisher,
        id_generator if id_generator is not None else TimeOrderedUUIDGenerator(),
    )
    publisher.subscribe(HoldPlaced, desk.handle)
    publisher.subscribe(BookCheckedOut, desk.handle)
    return desk


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    desk: CirculationDesk | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies: dict[str, object] = {"uow": uow}
    if desk is not None:
        dependencies["desk"] = desk
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def _assemble(
    uow: AbstractUnitOfWork, id_generator: IdGenerator | None
) -> AppContainer:
    desk = build_desk(uow, id_generator=id_generator)
    message_bus = build_message_bus(uow, COMMAND_HANDLERS, desk=desk)
    return AppContainer(message_bus=message_bus, desk=desk)


def bootstrap(url: str | None = None) -> AppContainer:
    """Wire the application against the configured database.

    Args:
        url: Database URL; defaults to `CIRCULATION_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    uow = build_write_uow(url if url is not None else config.get_db_url())
    logger.debug("Bootstrapped with %s", type(uow).__name__)
    return _assemble(uow, id_generator=None)


def bootstrap_in_memory(
    uow: InMemoryUnitOfWork | None = None, id_generator: IdGenerator | None = None
) -> AppContainer:
    """Wire the application against in-memory repositories (tests and demos)."""
    uow = uow if uow is not None else InMemoryUnitOfWork()
    logger.debug("Bootstrapped with %s", type(uow).__name__)
    return _assemble(uow, id_generator=id_generator)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
