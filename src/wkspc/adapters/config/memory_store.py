"""In-process configuration store implementing ConfigStorePort."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

from wkspc.core.exceptions import ConfigurationError
from wkspc.core.models import Mutability, Setting, Visibility


if TYPE_CHECKING:
    from collections.abc import Collection, Iterator


_ENV_PREFIX = "WKSPC_"


def env_var_name(key: str) -> str:
    """Map a setting key to its environment variable name.

    A leading "wkspc" is dropped since the prefix already carries it.

    Example:
        >>> env_var_name("wkspcLogLevel")
        'WKSPC_LOG_LEVEL'
    """
    name = key.removeprefix("wkspc")
    snake = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name)
    return _ENV_PREFIX + snake.upper()


class MemoryConfigStore:
    """Layered key/value store: default < environment < explicit set.

    Keys match exactly (no case folding). Only registered keys can be read
    or written; the environment layer applies to BASIC_GLOBAL settings only.

    Attributes:
        environ: Mapping consulted for environment overrides.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize an empty store.

        Args:
            environ: Environment mapping (defaults to os.environ).
        """
        self.environ = os.environ if environ is None else environ
        self._settings: dict[str, Setting] = {}
        self._overrides: dict[str, str] = {}

    def _setting(self, key: str) -> Setting:
        try:
            return self._settings[key]
        except KeyError:
            raise ConfigurationError(f"Unknown setting '{key}'") from None

    def register(self, setting: Setting) -> None:
        """Register default and description of a setting in one call."""
        self.set_default(setting.key, setting.default)
        self.set_desc(
            setting.key, setting.description, setting.visibility, setting.mutability
        )

    def set_default(self, key: str, value: str) -> None:
        """Register (or replace) the default value of key."""
        current = self._settings.get(key, Setting(key=key))
        self._settings[key] = Setting(
            key=key,
            default=value,
            description=current.description,
            visibility=current.visibility,
            mutability=current.mutability,
        )

    def set_desc(
        self,
        key: str,
        description: str,
        visibility: Visibility,
        mutability: Mutability,
    ) -> None:
        """Attach description and classes to an already registered key."""
        current = self._setting(key)
        self._settings[key] = Setting(
            key=key,
            default=current.default,
            description=description,
            visibility=visibility,
            mutability=mutability,
        )

    def get_string(self, key: str) -> str:
        """Return the effective value of key.

        Raises:
            ConfigurationError: If key was never registered.
        """
        setting = self._setting(key)
        if key in self._overrides:
            return self._overrides[key]
        if setting.mutability is Mutability.BASIC_GLOBAL:
            env_value = self.environ.get(env_var_name(key))
            if env_value is not None:
                return env_value
        return setting.default

    def set(self, key: str, value: str) -> None:
        """Override key with value.

        Raises:
            ConfigurationError: If key is unknown or CONST_GLOBAL.
        """
        setting = self._setting(key)
        if setting.mutability is Mutability.CONST_GLOBAL:
            raise ConfigurationError(f"Setting '{key}' is constant and cannot be changed")
        self._overrides[key] = value

    def settings(
        self, visibility: Collection[Visibility] | None = None
    ) -> Iterator[Setting]:
        """Iterate registered settings sorted by key.

        Args:
            visibility: Only yield settings with one of these visibilities.
                None yields every setting.
        """
        for key in sorted(self._settings):
            setting = self._settings[key]
            if visibility is None or setting.visibility in visibility:
                yield setting

    def __contains__(self, key: object) -> bool:
        return key in self._settings
