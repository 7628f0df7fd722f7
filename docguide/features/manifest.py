from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional

from . import FeatureDescription, FeatureRegistry, validate_key


@dataclass(frozen=True)
class FeatureEntry:
    key: str
    name: str
    html: Optional[str] = None
    html_file: Optional[Path] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> "FeatureEntry":
        if not isinstance(mapping, Mapping):
            raise ValueError("Each feature entry must be a JSON object.")

        key = mapping.get("key")
        if not isinstance(key, str) or not key.strip():
            raise ValueError("Each feature entry must include a non-empty 'key'.")

        validate_key(key.strip())

        name = mapping.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Feature '{key}' must include a non-empty 'name'.")

        html = mapping.get("html")
        html_file = mapping.get("html_file")
        if html is None and html_file is None:
            raise ValueError(f"Feature '{key}' must provide either 'html' or 'html_file'.")
        if html is not None and html_file is not None:
            raise ValueError(f"Feature '{key}' must not provide both 'html' and 'html_file'.")
        if html is not None and not isinstance(html, str):
            raise ValueError(f"Feature '{key}' has a non-string 'html' value.")

        return cls(
            key=key.strip(),
            name=name.strip(),
            html=html,
            html_file=Path(str(html_file)) if html_file is not None else None,
        )

    def resolve(self, base_dir: Path) -> FeatureDescription:
        if self.html is not None:
            body = self.html
        else:
            path = self.html_file if self.html_file.is_absolute() else base_dir / self.html_file
            if not path.is_file():
                raise FileNotFoundError(f"HTML file for feature '{self.key}' not found: {path}")
            body = path.read_text(encoding="utf-8")
        return FeatureDescription(key=self.key, name=self.name, html_body=body)


@dataclass(frozen=True)
class FeatureManifest:
    """Feature descriptions loaded from a JSON document."""

    entries: tuple[FeatureEntry, ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> "FeatureManifest":
        if not isinstance(mapping, Mapping):
            raise ValueError("Feature manifest must be a JSON object.")

        raw_features = mapping.get("features")
        if not isinstance(raw_features, Iterable) or isinstance(raw_features, (str, bytes, Mapping)):
            raise ValueError("Feature manifest must provide a 'features' array.")

        entries = tuple(FeatureEntry.from_mapping(entry) for entry in raw_features)
        seen: set[str] = set()
        for entry in entries:
            if entry.key in seen:
                raise ValueError(f"Duplicate feature key in manifest: '{entry.key}'.")
            seen.add(entry.key)
        return cls(entries=entries)

    def build_registry(self, base_dir: Path) -> FeatureRegistry:
        registry = FeatureRegistry()
        for entry in self.entries:
            registry.register(entry.resolve(base_dir))
        return registry


def load_manifest(path: Path) -> FeatureRegistry:
    """Read a feature manifest and return a registry in manifest order."""

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Feature manifest not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Feature manifest {path} is not valid JSON: {exc}") from exc

    manifest = FeatureManifest.from_mapping(data)
    return manifest.build_registry(path.parent)


__all__ = ["FeatureEntry", "FeatureManifest", "load_manifest"]
