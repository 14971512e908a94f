"""Settings models for Ghost CMS."""

from typing import ClassVar, FrozenSet, List, Optional, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr

from .base import GhostModel

# A setting holds a string, a boolean, a number or null, and nothing else.
SettingValue = Optional[Union[StrictBool, StrictInt, StrictFloat, StrictStr]]


class Setting(GhostModel):
    """A single site setting as a key/value pair."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"value"})

    key: str = ""
    value: SettingValue = None


class SettingsResponse(GhostModel):
    """Collection wrapper for site settings."""

    settings: List[Setting] = []

    def get(self, key: str) -> SettingValue:
        """Return the value of the setting named ``key``, or None."""
        for setting in self.settings:
            if setting.key == key:
                return setting.value
        return None
