"""Base class for tool providers.

A provider is a named service stub exposing a fixed menu of operations.  Each
operation takes a loosely-typed input mapping and returns an output mapping
synthesised from it.  Providers track an initialized/healthy pair that only
:meth:`ToolProvider.initialize` and :meth:`ToolProvider.shutdown` change.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from ..errors import OperationInputError, OperationNotFoundError, ProviderNotInitializedError
from ..templates import TemplateRenderer, get_renderer

logger = logging.getLogger(__name__)

Payload = dict[str, Any]
Handler = Callable[[Payload], Awaitable[Payload]]


@dataclass(frozen=True)
class ToolOperation:
    """A named unit of work on a provider."""

    name: str
    description: str
    handler: Handler
    input_schema: dict[str, str] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def missing_inputs(self, payload: Payload) -> list[str]:
        """Return the required keys that are absent (or ``None``) in *payload*."""
        return [key for key in self.required if payload.get(key) is None]

    async def execute(self, payload: Payload) -> Payload:
        return await self.handler(payload)


class ToolProvider(ABC):
    """Common lifecycle and dispatch for every provider.

    Subclasses set :attr:`name` and implement :meth:`_build_operations`.
    """

    name: str = ""
    version: str = "1.0.0"

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or get_renderer()
        self._initialized = False
        self._healthy = False
        self._operations: dict[str, ToolOperation] = {
            op.name: op for op in self._build_operations()
        }

    # -- Lifecycle ---------------------------------------------------------

    async def initialize(self) -> None:
        logger.info("Initializing provider %s", self.name)
        await self._setup()
        self._initialized = True
        self._healthy = True
        logger.debug("Provider %s initialized", self.name)

    async def shutdown(self) -> None:
        logger.info("Shutting down provider %s", self.name)
        self._initialized = False
        self._healthy = False
        await asyncio.sleep(0)

    async def is_healthy(self) -> bool:
        await asyncio.sleep(0)
        return self._healthy

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def _setup(self) -> None:
        """Hook for provider-specific start-up work."""
        await asyncio.sleep(0)

    # -- Operations --------------------------------------------------------

    @abstractmethod
    def _build_operations(self) -> list[ToolOperation]:
        """Return the provider's fixed operation menu."""

    def operations(self) -> dict[str, ToolOperation]:
        """Return a copy of the operation table (name -> operation)."""
        return dict(self._operations)

    def get_operation(self, name: str) -> ToolOperation | None:
        return self._operations.get(name)

    async def execute(self, operation_name: str, payload: Payload) -> Payload:
        """Run *operation_name* with *payload*.

        Raises:
            ProviderNotInitializedError: ``initialize()`` has not run (or
                ``shutdown()`` has).
            OperationNotFoundError: No such operation on this provider.
            OperationInputError: A required input key is missing.
        """
        if not self._initialized:
            raise ProviderNotInitializedError(self.name)

        operation = self._operations.get(operation_name)
        if operation is None:
            raise OperationNotFoundError(self.name, operation_name)

        missing = operation.missing_inputs(payload)
        if missing:
            raise OperationInputError(self.name, operation_name, missing)

        logger.debug("%s.%s called with keys %s", self.name, operation_name, sorted(payload))
        # Stand-in for real asynchronous work.
        await asyncio.sleep(0)
        return await operation.execute(dict(payload))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, version={self.version!r})"
