"""Forecast presenter: fetches a zone forecast and writes it to the console."""

import logging

from nwszones.browse import console
from nwszones.browse.console import Write
from nwszones.ingest.decoders import decode_forecast
from nwszones.ingest.noaa_client import NoaaClient
from nwszones.models.forecast import Forecast
from nwszones.reporting.formatters import format_forecast_text

logger = logging.getLogger(__name__)


class ForecastPresenter:
    def __init__(self, client: NoaaClient, write: Write = console.write):
        self.client = client
        self.write = write

    def present(self, zone_id: str) -> Forecast:
        """Fetch and render the forecast for zone_id.

        Nothing is written if the fetch fails; TransportError propagates.
        """
        forecast = decode_forecast(self.client.get_zone_forecast(zone_id), zone_id)
        if not forecast.has_periods:
            logger.info("Zone %s has no period-based forecast", zone_id)
        for line in format_forecast_text(forecast):
            self.write(line)
        return forecast
