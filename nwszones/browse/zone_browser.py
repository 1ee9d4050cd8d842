"""Zone browser: paginates a region's public zones and resolves one selection."""

import logging
from dataclasses import dataclass

from nwszones.browse import console
from nwszones.browse.console import ReadLine, Write
from nwszones.config.defaults import DEFAULT_REGION
from nwszones.ingest.decoders import decode_zones
from nwszones.ingest.noaa_client import NoaaClient
from nwszones.reporting.formatters import format_page_header, format_zone_line

logger = logging.getLogger(__name__)

PAGE_SIZE = 10

MORE_PROMPT = "\nType a [Zone ID] for forecast, or press 'ENTER' to see 10 more: "
END_PROMPT = "\nEnd of list. Enter a Zone ID to get forecast: "
MANUAL_PROMPT = "\nSelect a Zone ID from the list (e.g., COZ039): "


def normalize_region(raw: str | None, default: str = DEFAULT_REGION) -> str:
    region = (raw or "").strip().upper()
    return region or default


def normalize_zone_id(raw: str | None) -> str:
    return (raw or "").strip().upper()


@dataclass
class SessionState:
    total: int
    pointer: int = 0
    selected: str | None = None


class ZoneBrowser:
    def __init__(
        self,
        client: NoaaClient,
        read_line: ReadLine = console.read_line,
        write: Write = console.write,
        default_region: str = DEFAULT_REGION,
    ):
        self.client = client
        self.read_line = read_line
        self.write = write
        self.default_region = default_region

    def browse(self, region: str | None) -> str:
        """Show a region's zones page by page and return the chosen zone id.

        The id is not checked against the listed zones. Raises
        TransportError if the zone list cannot be fetched.
        """
        region = normalize_region(region, self.default_region)
        self.write(f"\nFetching zones for {region}...")
        zones = decode_zones(self.client.get_zones(region))
        logger.info("Fetched %d zones for %s", len(zones), region)

        state = SessionState(total=len(zones))
        while state.pointer < state.total:
            end = min(state.pointer + PAGE_SIZE, state.total)
            self.write(format_page_header(state.pointer, end, state.total))
            for zone in zones[state.pointer:end]:
                if zone is not None:
                    self.write(format_zone_line(zone))
            state.pointer = end

            if state.pointer < state.total:
                answer = normalize_zone_id(self.read_line(MORE_PROMPT))
                if answer:
                    state.selected = answer
                    break
            else:
                # Taken as-is, even when blank.
                state.selected = normalize_zone_id(self.read_line(END_PROMPT))

        if not state.selected:
            state.selected = normalize_zone_id(self.read_line(MANUAL_PROMPT))

        logger.info("Selected zone %r", state.selected)
        return state.selected
