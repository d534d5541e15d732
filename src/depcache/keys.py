"""Cache key derivation from the runner platform and manifest digests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKey:
    """
    Keys used to look up and store a dependency cache.

    Attributes:
        primary: Most specific key, ``{platform}-{package manager}-{digest}``.
        restore_keys: Less specific keys accepted for partial matches, in priority order.
    """

    primary: str
    restore_keys: tuple[str, ...]


def derive_cache_key(platform: str, package_manager: str, digest: str) -> CacheKey:
    """
    Derive the cache key for a package manager from a manifest digest.

    Examples:
        >>> key = derive_cache_key("Linux", "maven", "abc123")
        >>> key.primary
        'Linux-maven-abc123'
        >>> key.restore_keys
        ('Linux-maven',)
    """
    prefix = f"{platform}-{package_manager}"
    return CacheKey(primary=f"{prefix}-{digest}", restore_keys=(prefix,))
