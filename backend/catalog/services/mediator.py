"""
Request dispatch: maps each command/query type to the handler class that
serves it.
"""
from typing import Any, Callable, Dict, Optional, Type

from catalog.repositories.unit_of_work import UnitOfWork


class HandlerNotRegistered(LookupError):
    pass


class RequestHandler:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def handle(self, request):
        raise NotImplementedError


HANDLERS: Dict[type, Type[RequestHandler]] = {}


def handles(request_type: type) -> Callable[[Type[RequestHandler]], Type[RequestHandler]]:
    """Class decorator registering a handler for ``request_type``."""

    def register(handler_cls: Type[RequestHandler]) -> Type[RequestHandler]:
        if request_type in HANDLERS:
            raise ValueError(f"Handler already registered for {request_type.__name__}")
        HANDLERS[request_type] = handler_cls
        return handler_cls

    return register


class Mediator:
    def __init__(self, uow: UnitOfWork, registry: Optional[Dict[type, Type[RequestHandler]]] = None):
        self.uow = uow
        if registry is None:
            # importing the handlers module fills HANDLERS
            import catalog.services.product_handlers  # noqa: F401

            registry = HANDLERS
        self.registry = registry

    def send(self, request) -> Any:
        handler_cls = self.registry.get(type(request))
        if handler_cls is None:
            raise HandlerNotRegistered(f"No handler registered for {type(request).__name__}")
        return handler_cls(self.uow).handle(request)
