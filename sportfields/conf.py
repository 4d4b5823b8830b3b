"""Engine settings, read from the optional ``SPORTFIELDS`` dict in Django settings.

Example::

    SPORTFIELDS = {
        "DEFAULT_PAGE_SIZE": 20,
    }

When Django settings are not configured the defaults apply.
"""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "DEFAULT_PAGE_SIZE": 12,
    "DEFAULT_STATUS": "available",
}


class EngineSettings:
    """Attribute access to SPORTFIELDS values with defaults."""

    def __init__(self, defaults: dict[str, Any]) -> None:
        self._defaults = defaults

    @property
    def user_settings(self) -> dict[str, Any]:
        if not settings.configured:
            return {}
        return getattr(settings, "SPORTFIELDS", {})

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name not in self._defaults:
            raise AttributeError(f"Invalid sportfields setting: {name}")
        return self.user_settings.get(name, self._defaults[name])


engine_settings = EngineSettings(DEFAULTS)
