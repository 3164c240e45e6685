"""Runtime settings, read from ``AQUAWORLD_*`` environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "AQUAWORLD_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name.upper()} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    seed_catalog: bool = True
    log_level: str = "INFO"
    log_json: bool = False
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment; unset variables keep defaults.

        ``AQUAWORLD_SEED_CATALOG=false`` -> ``Settings(seed_catalog=False)``.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for key, value in env.items():
            if key.startswith(ENV_PREFIX):
                values[key[len(ENV_PREFIX):].lower()] = value

        kwargs: dict[str, object] = {}
        if "seed_catalog" in values:
            kwargs["seed_catalog"] = _parse_bool("seed_catalog", values["seed_catalog"])
        if "log_json" in values:
            kwargs["log_json"] = _parse_bool("log_json", values["log_json"])
        if "log_level" in values:
            kwargs["log_level"] = values["log_level"].strip().upper()
        if "currency" in values:
            kwargs["currency"] = values["currency"].strip().upper()
        return cls(**kwargs)  # type: ignore[arg-type]
