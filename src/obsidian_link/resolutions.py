"""Embed sizes for video players, keyed by resolution name."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .exceptions import ConfigError

STANDARD_RESOLUTIONS: Mapping[str, tuple[int, int]] = MappingProxyType({
    "nHD": (640, 360),
    "FWVGA": (854, 480),
    "qHD": (960, 540),
    "SD": (1280, 720),
    "WXGA": (1366, 768),
    "HD+": (1600, 900),
    "FHD": (1920, 1080),
    "WQHD": (2560, 1440),
    "QHD+": (3200, 1800),
    "4K": (3840, 2160),
    "5K": (5120, 2880),
    "8K": (7680, 4320),
    "16K": (15360, 8640),
})

# Portrait sizes for short-form video
VERTICAL_RESOLUTIONS: Mapping[str, tuple[int, int]] = MappingProxyType({
    "480p": (480, 854),
    "720p": (720, 1280),
    "1080p": (1080, 1920),
    "1440p": (1440, 2560),
    "2160p": (2160, 3840),
})


@dataclass(frozen=True)
class ResolutionTables:
    """The pair of lookup tables used to size embeds."""

    standard: Mapping[str, tuple[int, int]]
    vertical: Mapping[str, tuple[int, int]]

    def table_for(self, family: str) -> Mapping[str, tuple[int, int]]:
        """Shorts use the vertical table, every other family the standard one."""
        if family == "shorts":
            return self.vertical
        return self.standard


RESOLUTION_TABLES = ResolutionTables(STANDARD_RESOLUTIONS, VERTICAL_RESOLUTIONS)


def lookup_resolution(
    family: str,
    key: str,
    tables: ResolutionTables = RESOLUTION_TABLES,
) -> tuple[int, int]:
    """Return (width, height) for a rule family and resolution name.

    Raises ConfigError if the name is not in the family's table.
    """
    try:
        return tables.table_for(family)[key]
    except KeyError:
        raise ConfigError(
            f"Resolution not found for {family}: {key!r}"
        ) from None
