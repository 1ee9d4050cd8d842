"""CLI entry point for the NWS zone forecast browser."""

import argparse
import logging

import yaml

from nwszones.browse import console
from nwszones.browse.console import ReadLine, Write
from nwszones.browse.forecast_presenter import ForecastPresenter
from nwszones.browse.zone_browser import ZoneBrowser
from nwszones.config.defaults import EXAMPLE_REGIONS
from nwszones.config.loader import load_config
from nwszones.config.schema import AppConfig
from nwszones.ingest.noaa_client import NoaaClient
from nwszones.reporting.formatters import BANNER, format_error

logger = logging.getLogger(__name__)

REGION_PROMPT = f"\nEnter a State Code (e.g., {', '.join(EXAMPLE_REGIONS)}): "
COMPLETE_PROMPT = "\nProcess complete. Press Enter to exit."


def main(
    argv: list[str] | None = None,
    read_line: ReadLine = console.read_line,
    write: Write = console.write,
) -> int:
    parser = argparse.ArgumentParser(
        prog="nwszones",
        description="Browse NWS public zones and show a zone forecast",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--region", default=None, help="State code; skips the region prompt"
    )
    parser.add_argument(
        "--no-pause", action="store_true", help="Exit without waiting for Enter"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log verbosity (-v INFO, -vv DEBUG)",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        write(f"Error: invalid config: {e}")
        return 1

    level = config.log_level.value
    if args.verbose == 1:
        level = "INFO"
    elif args.verbose > 1:
        level = "DEBUG"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run(config, args.region, read_line, write)

    write(COMPLETE_PROMPT)
    if not args.no_pause:
        read_line("")
    return 0


def run(
    config: AppConfig,
    region: str | None,
    read_line: ReadLine,
    write: Write,
) -> None:
    """Browse zones and show one forecast; any failure is printed, not raised."""
    with NoaaClient(
        base_url=config.api.base_url, timeout=config.api.timeout_seconds
    ) as client:
        write(BANNER)
        if region is None:
            region = read_line(REGION_PROMPT)

        try:
            zone_id = ZoneBrowser(
                client, read_line, write, default_region=config.default_region
            ).browse(region)
            ForecastPresenter(client, write).present(zone_id)
        except Exception as e:
            logger.debug("Browse failed", exc_info=True)
            for line in format_error(e):
                write(line)
