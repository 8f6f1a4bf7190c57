"""Provider registry.

Owns the set of registered tool providers and brokers named-operation calls
to them.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import OperationNotFoundError, ProviderNotFoundError, ProviderUnhealthyError
from .providers.base import ToolProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry of named tool providers.

    Providers are kept in registration order.  The registry never lets
    providers see each other; every call goes through :meth:`invoke`.
    """

    def __init__(self) -> None:
        self._providers: dict[str, ToolProvider] = {}

    async def register(self, provider: ToolProvider) -> None:
        """Initialise *provider* and store it under its name.

        A provider whose ``initialize()`` raises is not registered; the
        exception propagates and any provider already under that name stays.
        Registering a name again replaces the previous provider, which is
        shut down once the new one is initialised.
        """
        logger.info("Registering provider: %s (v%s)", provider.name, provider.version)
        await provider.initialize()
        existing = self._providers.get(provider.name)
        self._providers[provider.name] = provider
        if existing is not None and existing is not provider:
            logger.info("Provider %s replaced; shutting down previous instance", provider.name)
            await existing.shutdown()

    async def unregister(self, name: str) -> None:
        """Shut down and remove the provider called *name*."""
        provider = self._providers.get(name)
        if provider is None:
            logger.warning("Provider %s not registered; nothing to unregister", name)
            return
        logger.info("Unregistering provider: %s", name)
        await provider.shutdown()
        del self._providers[name]

    def get(self, name: str) -> ToolProvider | None:
        return self._providers.get(name)

    def list_providers(self) -> list[str]:
        """Return registered provider names in registration order."""
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    async def invoke(
        self,
        provider_name: str,
        operation_name: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Run *operation_name* on the provider called *provider_name*.

        Returns:
            The operation's output mapping, unchanged.

        Raises:
            ProviderNotFoundError: No provider with that name is registered.
            ProviderUnhealthyError: The provider's liveness probe is ``False``.
            OperationNotFoundError: The provider has no such operation.
        """
        provider = self._providers.get(provider_name)
        if provider is None:
            raise ProviderNotFoundError(provider_name)

        if not await provider.is_healthy():
            raise ProviderUnhealthyError(provider_name)

        if provider.get_operation(operation_name) is None:
            raise OperationNotFoundError(provider_name, operation_name)

        logger.debug("Invoking %s.%s", provider_name, operation_name)
        return await provider.execute(operation_name, payload or {})

    async def health_check_all(self) -> dict[str, bool]:
        """Probe every provider; a probe that raises counts as unhealthy."""
        results: dict[str, bool] = {}
        for name, provider in self._providers.items():
            try:
                results[name] = bool(await provider.is_healthy())
            except Exception as exc:
                logger.warning("Health check for %s raised: %s", name, exc)
                results[name] = False
        return results

    async def shutdown_all(self) -> None:
        """Shut down every provider, then forget them all."""
        for name, provider in list(self._providers.items()):
            logger.info("Shutting down provider: %s", name)
            await provider.shutdown()
        self._providers.clear()
