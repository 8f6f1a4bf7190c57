"""Shared behaviour for the domain generators."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from ..config import Config
from ..errors import GenerationError
from ..models import AppRequirement
from ..registry import ProviderRegistry
from .defaults import with_defaults

logger = logging.getLogger(__name__)


@runtime_checkable
class CodeGenerator(Protocol):
    """Anything that can be registered with ``Orchestrator.register_generator``."""

    name: str

    async def generate(self, requirement: AppRequirement) -> dict[str, Any]: ...


class DomainGenerator(ABC):
    """Base class for the database, backend, frontend and react-app generators.

    :meth:`generate` resolves the fallback defaults, delegates to
    :meth:`_generate`, and wraps any failure in :class:`GenerationError`.
    Calls into the registry are issued one at a time, in input order.
    """

    name: str = ""

    def __init__(self, registry: ProviderRegistry, config: Config | None = None) -> None:
        self.registry = registry
        self.config = config or Config()

    async def generate(self, requirement: AppRequirement) -> dict[str, Any]:
        logger.info("Generating %s code for %s", self.name, requirement.name)
        resolved = with_defaults(requirement)
        try:
            result = await self._generate(resolved)
        except GenerationError:
            raise
        except Exception as exc:
            logger.error("%s generation failed: %s", self.name, exc)
            raise GenerationError(self.name, str(exc)) from exc
        logger.debug("%s generation produced %d entries", self.name, len(result))
        return result

    @abstractmethod
    async def _generate(self, requirement: AppRequirement) -> dict[str, Any]:
        """Produce the bundle for a requirement whose sections are all set."""


def claim_path(files: dict[str, str], path: str, content: str, generator: str) -> None:
    """Insert *content* at *path*, refusing to overwrite an earlier unit's file."""
    if path in files:
        raise GenerationError(generator, f"two units map to the same file: {path}")
    files[path] = content
