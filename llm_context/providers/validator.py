"""Single-key credential validation."""

import logging

from llm_context.core import (
    APIHostError,
    APIKeyError,
    CheckResult,
    ConfigurationError,
    ErrorDetail,
    LLMContextError,
    Model,
    NoModelSelectedError,
    Provider,
)
from llm_context.providers.credentials import mask_key
from llm_context.providers.probe import OpenAIProbeClient, ProbeClient

logger = logging.getLogger(__name__)


class CredentialValidator:
    """Tests one API key + host + model combination for connectivity.

    Never mutates stored state: the key and host under test are applied to a
    transient copy of the provider. Failures are reported in the returned
    ``CheckResult`` instead of being raised.

    Example:
        >>> validator = CredentialValidator()
        >>> result = await validator.check(provider, model, api_key="sk-...")
        >>> result.valid
        True
    """

    def __init__(self, probe: ProbeClient | None = None) -> None:
        self.probe = probe or OpenAIProbeClient()

    def _precondition_error(self, provider: Provider, model: Model | None) -> ConfigurationError | None:
        if model is None:
            return NoModelSelectedError(provider=provider.id)
        if provider.requires_api_key and not provider.api_key.strip():
            return APIKeyError("API key is required", provider=provider.id)
        if not provider.api_host.strip():
            return APIHostError("API host is required", provider=provider.id)
        if provider.is_azure and not provider.api_version:
            return ConfigurationError("Azure OpenAI requires an API version", provider=provider.id)
        return None

    async def check(
        self,
        provider: Provider,
        model: Model | None,
        api_key: str | None = None,
        api_host: str | None = None,
    ) -> CheckResult:
        """Check whether ``provider`` answers for ``model`` with the given key and host.

        Args:
            provider: Stored provider configuration
            model: Representative model to probe
            api_key: Key to test instead of the stored one
            api_host: Host to test instead of the stored one

        Returns:
            CheckResult with ``valid`` and, on failure, diagnostic detail
        """
        view = provider.with_overrides(api_key=api_key, api_host=api_host)

        config_error = self._precondition_error(view, model)
        if config_error is not None:
            logger.warning(f"Skipping check for provider {view.id}: {config_error.detail}")
            return CheckResult(valid=False, error=ErrorDetail.from_exception(config_error))

        try:
            valid = await self.probe.probe(view, model)
        except LLMContextError as e:
            logger.warning(
                f"Key {mask_key(view.api_key)} failed for {model.id}@{view.id}: {e.detail}"
            )
            return CheckResult(valid=False, error=ErrorDetail.from_exception(e))
        except Exception as e:
            logger.warning(f"Key {mask_key(view.api_key)} failed for {model.id}@{view.id}: {e}")
            return CheckResult(valid=False, error=ErrorDetail.from_exception(e, provider=view.id))

        if not valid:
            logger.warning(f"Empty response from {model.id}@{view.id}")
            return CheckResult(
                valid=False,
                error=ErrorDetail(message="Empty response from model", provider=view.id),
            )

        logger.info(f"Key {mask_key(view.api_key)} valid for {model.id}@{view.id}")
        return CheckResult(valid=True)


async def check_api(
    provider: Provider,
    model: Model | None,
    probe: ProbeClient | None = None,
) -> CheckResult:
    """Check a provider view (key and host already applied) against ``model``."""
    return await CredentialValidator(probe).check(provider, model)
