"""Runtime settings read from the environment."""

import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "LLM_CONTEXT_"


class Settings(BaseModel):
    """Tunable constants for validation and retrieval."""

    default_document_count: int = 6
    chunk_size_threshold: int = 1024
    placeholder_api_key: str = "secret"

    # Ingested files live under <app data>/Data/Files/<id>.<ext>
    app_data_marker: str = "CherryStudio"
    file_url_scheme: str = "http://file/"

    probe_timeout: int = 30
    max_concurrent_checks: int = 4

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``LLM_CONTEXT_*`` variables, keeping defaults for the rest."""
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}

        for name, field in cls.model_fields.items():
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or raw == "":
                continue
            if field.annotation is int:
                try:
                    values[name] = int(raw)
                except ValueError:
                    logger.warning(
                        f"Ignoring {ENV_PREFIX}{name.upper()}={raw!r}: not an integer, "
                        f"using default {field.default}"
                    )
                    continue
            else:
                values[name] = raw

        return cls(**values)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, loaded from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
