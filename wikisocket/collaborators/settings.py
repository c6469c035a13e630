"""Settings collaborators backed by the environment or a plain mapping."""

from __future__ import annotations

import os
from collections.abc import Mapping

from ..config.settings import SETTING_DEFAULTS, SETTING_ENV_VARS


class EnvSettingsStore:
    """Resolve settings from ``WIKI_*`` environment variables.

    Unknown keys resolve to None. Values are read on every call; the
    startup loader reads each key once and freezes the result.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    async def get_setting(self, key: str) -> str | None:
        env_var = SETTING_ENV_VARS.get(key)
        if env_var is None:
            return None
        value = self._environ.get(env_var)
        if value is None:
            return SETTING_DEFAULTS.get(key)
        return value


class StaticSettingsStore:
    """Serve settings from a fixed mapping (tests, embedded deployments)."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)

    async def get_setting(self, key: str) -> str | None:
        return self._values.get(key)


__all__ = ["EnvSettingsStore", "StaticSettingsStore"]
