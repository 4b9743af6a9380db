"""Runtime configuration for the selectorkit CLI and document loader."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

_ENV_PREFIX = "SELECTORKIT_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    json_indent: int = 2
    max_depth: int = 64  # nesting limit when loading documents

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SelectorKitConfig:
        """Build a config from ``SELECTORKIT_*`` environment variables.

        Unset variables keep their defaults. An unknown log level or an integer
        field that does not parse raises ``ValueError``.
        """
        env = os.environ if environ is None else environ
        config = cls()
        overrides: dict[str, object] = {}
        if level := env.get(f"{_ENV_PREFIX}LOG_LEVEL"):
            if level.upper() not in LOG_LEVELS:
                raise ValueError(f"{_ENV_PREFIX}LOG_LEVEL: unknown level {level!r}")
            overrides["log_level"] = level.upper()
        if indent := env.get(f"{_ENV_PREFIX}JSON_INDENT"):
            overrides["json_indent"] = _parse_int("JSON_INDENT", indent)
        if depth := env.get(f"{_ENV_PREFIX}MAX_DEPTH"):
            overrides["max_depth"] = _parse_int("MAX_DEPTH", depth)
        return replace(config, **overrides)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{_ENV_PREFIX}{name}: expected an integer, got {raw!r}") from None
