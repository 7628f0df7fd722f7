from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

_KEY_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.-]*")


def validate_key(key: str) -> str:
    """Return ``key`` if it can be used inside HTML ids and anchors."""

    if not isinstance(key, str) or not _KEY_RE.fullmatch(key):
        raise ValueError(
            f"Invalid feature key {key!r}: use letters, digits, '-', '_' or '.'."
        )
    return key


@dataclass(frozen=True)
class FeatureDescription:
    """A documented capability shown as its own section of the User's Guide."""

    key: str
    name: str
    html_body: str


class FeatureRegistry:
    """Ordered in-memory registry of feature descriptions."""

    def __init__(self) -> None:
        self._features: List[FeatureDescription] = []

    def register(self, feature: FeatureDescription) -> FeatureDescription:
        validate_key(feature.key)
        # Avoid duplicate registration when modules are re-imported
        for existing in self._features:
            if existing is feature or existing.key == feature.key:
                return existing
        self._features.append(feature)
        return feature

    def iter(self) -> tuple[FeatureDescription, ...]:
        return tuple(self._features)

    def __len__(self) -> int:
        return len(self._features)


registry = FeatureRegistry()


def register_feature(feature: FeatureDescription) -> FeatureDescription:
    """Register a feature description with the global registry."""

    return registry.register(feature)


def iter_features() -> Iterable[FeatureDescription]:
    """Yield registered feature descriptions in registration order."""

    return registry.iter()


__all__ = [
    "FeatureDescription",
    "FeatureRegistry",
    "iter_features",
    "register_feature",
    "registry",
    "validate_key",
]
