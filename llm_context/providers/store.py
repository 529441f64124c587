"""In-memory, app-wide store of providers, assistants and the default model."""

import asyncio
import logging

from llm_context.core.exceptions import ProviderNotFoundError
from llm_context.core.models import Assistant, Model, Provider

logger = logging.getLogger(__name__)


class ProviderStore:
    """Holds the configured providers and everything that references their models.

    Synchronous methods complete without suspending, so each of them is atomic
    with respect to other coroutines. Credential writes go through
    ``update_credentials``, which serializes writers per provider.
    """

    def __init__(
        self,
        providers: list[Provider] | None = None,
        assistants: list[Assistant] | None = None,
        default_model: Model | None = None,
    ) -> None:
        self._providers: list[Provider] = list(providers or [])
        self._assistants: list[Assistant] = list(assistants or [])
        self._default_model = default_model
        self._credential_locks: dict[str, asyncio.Lock] = {}

    @property
    def providers(self) -> list[Provider]:
        return list(self._providers)

    @property
    def assistants(self) -> list[Assistant]:
        return list(self._assistants)

    @property
    def default_model(self) -> Model | None:
        return self._default_model

    def get_provider(self, provider_id: str) -> Provider:
        """Look up a provider by id.

        Raises:
            ProviderNotFoundError: If no provider has this id
        """
        for provider in self._providers:
            if provider.id == provider_id:
                return provider
        raise ProviderNotFoundError(provider=provider_id)

    def get_provider_by_model(self, model: Model) -> Provider:
        """Provider owning ``model``.

        Raises:
            ProviderNotFoundError: If the owning provider is missing
        """
        for provider in self._providers:
            if provider.id == model.provider:
                return provider
        raise ProviderNotFoundError(provider=model.provider, model_id=model.id)

    def has_model(self, model: Model | None) -> bool:
        """True when an enabled provider offers a model with this id."""
        if model is None:
            return False
        return any(
            m.id == model.id for p in self._providers if p.enabled for m in p.models
        )

    def update_provider(self, provider: Provider) -> None:
        """Replace the stored provider with the same id.

        Raises:
            ProviderNotFoundError: If the provider is not in the store
        """
        for index, existing in enumerate(self._providers):
            if existing.id == provider.id:
                self._providers[index] = provider
                return
        raise ProviderNotFoundError(provider=provider.id)

    def update_api_host(self, provider_id: str, api_host: str) -> Provider:
        """Store a new host; a blank host keeps the current one."""
        provider = self.get_provider(provider_id)
        if not api_host.strip():
            logger.debug(f"Ignoring blank API host for provider {provider_id}")
            return provider
        provider = provider.model_copy(update={"api_host": api_host})
        self.update_provider(provider)
        return provider

    def reset_api_host(self, provider_id: str, default_host: str) -> Provider:
        """Restore the provider's preconfigured host."""
        provider = self.get_provider(provider_id).model_copy(update={"api_host": default_host})
        self.update_provider(provider)
        return provider

    def _credential_lock(self, provider_id: str) -> asyncio.Lock:
        lock = self._credential_locks.get(provider_id)
        if lock is None:
            lock = asyncio.Lock()
            self._credential_locks[provider_id] = lock
        return lock

    async def update_credentials(self, provider_id: str, api_key: str) -> Provider:
        """Write a provider's credential field.

        Writers to the same provider are queued so that two checks finishing
        close together cannot interleave their writes.
        """
        async with self._credential_lock(provider_id):
            provider = self.get_provider(provider_id).model_copy(update={"api_key": api_key})
            self.update_provider(provider)
            return provider

    def commit_model_update(
        self,
        provider: Provider,
        assistants: list[Assistant],
        default_model: Model | None,
    ) -> None:
        """Write a provider, the assistant list and the default model together.

        Raises:
            ProviderNotFoundError: If the provider is not in the store; nothing is written
        """
        providers = list(self._providers)
        for index, existing in enumerate(providers):
            if existing.id == provider.id:
                providers[index] = provider
                break
        else:
            raise ProviderNotFoundError(provider=provider.id)

        self._providers = providers
        self._assistants = list(assistants)
        self._default_model = default_model
