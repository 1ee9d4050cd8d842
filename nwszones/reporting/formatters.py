"""Console formatters for zone pages, forecasts and errors."""

from nwszones.models.forecast import Forecast
from nwszones.models.zone import Zone

BANNER = "=== NATIONAL WEATHER SERVICE DATA TOOL ==="
PAGE_RULE = "-" * 34
PERIOD_RULE = "-" * 30
NO_DATA = "No data available."
ERROR_TIP = (
    "Tip: Ensure you entered a valid Zone ID (State abbreviation) "
    "and have an internet connection."
)


def format_zone_line(zone: Zone) -> str:
    return f"[{zone.id}] - {zone.name}"


def format_page_header(start: int, end: int, total: int) -> str:
    """Header for entries [start, end) of total, shown 1-based."""
    return (
        f"\nLOCAL ENTITIES - Displaying {start + 1} to {end} of {total}:\n"
        f"{PAGE_RULE}"
    )


def format_forecast_text(forecast: Forecast) -> list[str]:
    """Render a forecast as console lines.

    Period forecasts get one block per period; anything else collapses to a
    single fallback line.
    """
    if not forecast.has_periods:
        return [f"Forecast: {forecast.detailed_forecast or NO_DATA}"]

    lines = ["\n--- DETAILED FORECAST ---"]
    for period in forecast.periods:
        lines.append(f"\n[{period.name.upper()}]")
        lines.append(period.detailed_forecast)
        lines.append(PERIOD_RULE)
    return lines


def format_error(exc: BaseException) -> list[str]:
    return [f"\nImplementation Error: {exc}", ERROR_TIP]
