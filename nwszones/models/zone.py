"""NWS zone models."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Zone:
    id: str  # e.g. "COZ039"
    name: str


# A feature without a properties object decodes to None so page
# boundaries still line up with the server's list.
ZoneList: TypeAlias = list[Zone | None]
