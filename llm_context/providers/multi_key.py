"""Validation of provider credentials holding several API keys."""

import asyncio
import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from llm_context.config import Settings, get_settings
from llm_context.core import CheckResult, ErrorDetail, Model, Provider
from llm_context.providers.credentials import CredentialSet, mask_key
from llm_context.providers.store import ProviderStore
from llm_context.providers.validator import CredentialValidator

logger = logging.getLogger(__name__)


class KeyCheckOutcome(BaseModel):
    """Result of checking one key, for display next to that key."""

    index: int
    key: str
    valid: bool
    error: ErrorDetail | None = None


class MultiKeyCheckResult(BaseModel):
    """Keys that checked valid, in input order, plus every per-key outcome."""

    valid_keys: list[str] = Field(default_factory=list)
    outcomes: list[KeyCheckOutcome] = Field(default_factory=list)

    @property
    def all_invalid(self) -> bool:
        return bool(self.outcomes) and not self.valid_keys


class MultiKeyValidationCoordinator:
    """Runs a credential check for every key of a provider.

    Each key is checked independently with its own transient provider view.
    Checks may run concurrently (bounded by ``max_concurrent_checks``); results
    are collected by input position, never by completion order. Keys are not
    deduplicated: a key given twice is checked twice. The coordinator never
    writes the provider's stored credential; see ``apply_valid_keys``.
    """

    def __init__(
        self,
        validator: CredentialValidator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.validator = validator or CredentialValidator()
        self.settings = settings or get_settings()

    async def check_many(
        self,
        provider: Provider,
        model: Model | None,
        keys: Sequence[str],
        api_host: str | None = None,
    ) -> MultiKeyCheckResult:
        """Check every key in ``keys`` against ``model``.

        Args:
            provider: Stored provider configuration
            model: Representative model to probe
            keys: Parsed keys, in order (see ``CredentialSet.parse``)
            api_host: Host to test instead of the stored one

        Returns:
            MultiKeyCheckResult with the valid subsequence and per-key outcomes
        """
        if not keys:
            return MultiKeyCheckResult()

        semaphore = asyncio.Semaphore(max(1, self.settings.max_concurrent_checks))

        async def check_one(key: str) -> CheckResult:
            async with semaphore:
                return await self.validator.check(provider, model, api_key=key, api_host=api_host)

        results = await asyncio.gather(*(check_one(key) for key in keys))

        outcomes = [
            KeyCheckOutcome(index=i, key=key, valid=result.valid, error=result.error)
            for i, (key, result) in enumerate(zip(keys, results))
        ]
        valid_keys = [o.key for o in outcomes if o.valid]

        logger.info(
            f"Checked {len(keys)} keys for provider {provider.id}: {len(valid_keys)} valid"
        )
        for outcome in outcomes:
            if not outcome.valid:
                logger.debug(f"Key #{outcome.index} {mask_key(outcome.key)} invalid")

        return MultiKeyCheckResult(valid_keys=valid_keys, outcomes=outcomes)

    async def check_credential_string(
        self,
        provider: Provider,
        model: Model | None,
        raw_keys: str | None = None,
        api_host: str | None = None,
    ) -> MultiKeyCheckResult:
        """Parse a raw credential field (the provider's own by default) and check each key."""
        raw = provider.api_key if raw_keys is None else raw_keys
        return await self.check_many(provider, model, CredentialSet.parse(raw).keys, api_host)


async def apply_valid_keys(
    store: ProviderStore,
    provider_id: str,
    result: MultiKeyCheckResult,
) -> Provider | None:
    """Persist the deduplicated valid keys as the provider's credential.

    When no key checked valid the stored credential is left untouched.

    Returns:
        The updated provider, or None if nothing was written
    """
    if not result.valid_keys:
        logger.warning(f"No valid keys for provider {provider_id}; keeping stored credential")
        return None

    credentials = CredentialSet(result.valid_keys).deduplicated()
    return await store.update_credentials(provider_id, credentials.serialize())
