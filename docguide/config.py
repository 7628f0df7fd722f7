from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Sequence, Tuple

DEFAULT_FORMATTER_COMMAND: Tuple[str, ...] = ("groff", "-t", "-mandoc", "-Thtml")

FORMATTER_ENV = "DOCGUIDE_FORMATTER"
FORMATTER_TIMEOUT_ENV = "DOCGUIDE_FORMATTER_TIMEOUT"


@dataclass(frozen=True)
class GuideConfig:
    """Settings for generating the User's Guide."""

    formatter_command: Tuple[str, ...] = DEFAULT_FORMATTER_COMMAND
    formatter_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        command = tuple(str(part) for part in self.formatter_command)
        if not command or not command[0].strip():
            raise ValueError("Formatter command must not be empty.")
        if self.formatter_timeout is not None and self.formatter_timeout <= 0:
            raise ValueError("Formatter timeout must be a positive number of seconds.")
        object.__setattr__(self, "formatter_command", command)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GuideConfig":
        env = os.environ if environ is None else environ
        command = DEFAULT_FORMATTER_COMMAND
        timeout: Optional[float] = None

        raw_command = env.get(FORMATTER_ENV, "").strip()
        if raw_command:
            command = tuple(shlex.split(raw_command))

        raw_timeout = env.get(FORMATTER_TIMEOUT_ENV, "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ValueError(
                    f"{FORMATTER_TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}."
                ) from exc

        return cls(formatter_command=command, formatter_timeout=timeout)

    def with_overrides(
        self,
        *,
        command: Sequence[str] | None = None,
        timeout: Optional[float] = None,
    ) -> "GuideConfig":
        """Return a copy with any provided values replacing the current ones."""

        updated = self
        if command:
            updated = replace(updated, formatter_command=tuple(command))
        if timeout is not None:
            updated = replace(updated, formatter_timeout=timeout)
        return updated


__all__ = [
    "DEFAULT_FORMATTER_COMMAND",
    "FORMATTER_ENV",
    "FORMATTER_TIMEOUT_ENV",
    "GuideConfig",
]
