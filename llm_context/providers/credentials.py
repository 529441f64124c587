"""Multi-key credential strings as a value type."""

from collections.abc import Iterable, Iterator

from llm_context.core.models import Provider

KEY_SEPARATOR = ","


def format_api_keys(value: str) -> str:
    """Normalize typed input so every key delimiter becomes a comma.

    Full-width commas, spaces and newlines are all treated as separators.
    """
    return (
        value.replace("，", KEY_SEPARATOR)
        .replace("\r\n", KEY_SEPARATOR)
        .replace("\n", KEY_SEPARATOR)
        .replace(" ", KEY_SEPARATOR)
    )


def mask_key(key: str) -> str:
    """Mask an API key, showing only the last 4 characters.

    Args:
        key: The full API key string.

    Returns:
        Masked string like ``sk-...AbCd``.
    """
    if len(key) <= 4:
        return "****"
    return f"{key[:3]}...{key[-4:]}"


class CredentialSet:
    """Ordered API keys stored together in one provider credential field."""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._keys: tuple[str, ...] = tuple(keys)

    @classmethod
    def parse(cls, raw: str | None) -> "CredentialSet":
        """Split a raw credential field into keys.

        Delimiters are normalized first; surrounding whitespace is trimmed and
        empty segments are dropped. Order and duplicates are preserved.
        """
        if not raw:
            return cls()
        segments = format_api_keys(raw).split(KEY_SEPARATOR)
        return cls(k.strip() for k in segments if k.strip())

    def serialize(self) -> str:
        return KEY_SEPARATOR.join(self._keys)

    def deduplicated(self) -> "CredentialSet":
        """Drop repeated keys, keeping the first occurrence of each."""
        return CredentialSet(dict.fromkeys(self._keys))

    @property
    def keys(self) -> list[str]:
        return list(self._keys)

    @property
    def is_multi(self) -> bool:
        return len(self._keys) > 1

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CredentialSet):
            return self._keys == other._keys
        return NotImplemented

    def __repr__(self) -> str:
        return f"CredentialSet({[mask_key(k) for k in self._keys]!r})"


class KeyRotator:
    """Round-robin selection of the key to use for the next request of a provider."""

    def __init__(self) -> None:
        self._last_used: dict[str, str] = {}

    def next_key(self, provider: Provider) -> str:
        """Key following the one used last time for this provider.

        A single key is returned as-is; an empty credential yields ``""``.
        If the remembered key was removed, rotation restarts at the first key.
        """
        keys = CredentialSet.parse(provider.api_key).keys
        if not keys:
            return ""
        if len(keys) == 1:
            return keys[0]

        last = self._last_used.get(provider.id)
        if last in keys:
            key = keys[(keys.index(last) + 1) % len(keys)]
        else:
            key = keys[0]

        self._last_used[provider.id] = key
        return key

    def reset(self, provider_id: str | None = None) -> None:
        if provider_id is None:
            self._last_used.clear()
        else:
            self._last_used.pop(provider_id, None)


key_rotator = KeyRotator()
