"""Decode raw NWS GeoJSON into typed zone and forecast records."""

import logging

from nwszones.ingest.errors import DecodeError
from nwszones.models.forecast import Forecast, ForecastPeriod
from nwszones.models.zone import Zone, ZoneList

logger = logging.getLogger(__name__)


def decode_zones(raw: dict) -> ZoneList:
    """Decode a zone collection.

    Features without a properties object become None; features whose
    properties lack an id or name raise DecodeError.
    """
    features = raw.get("features")
    if not isinstance(features, list):
        raise DecodeError("Zone response has no 'features' list")

    zones: ZoneList = []
    for i, feature in enumerate(features):
        props = feature.get("properties") if isinstance(feature, dict) else None
        if props is None:
            logger.debug("Zone feature %d has no properties", i)
            zones.append(None)
            continue
        zones.append(
            Zone(
                id=_require_str(props, "id", f"features[{i}].properties"),
                name=_require_str(props, "name", f"features[{i}].properties"),
            )
        )
    return zones


def decode_forecast(raw: dict, zone_id: str) -> Forecast:
    """Decode a zone forecast into either its periods or its fallback narrative."""
    properties = raw.get("properties") or {}
    if not isinstance(properties, dict):
        raise DecodeError("Forecast 'properties' is not an object")

    periods = properties.get("periods")
    if periods:
        if not isinstance(periods, list):
            raise DecodeError("Forecast 'periods' is not a list")
        return Forecast(
            zone_id=zone_id,
            periods=tuple(
                _decode_period(p, f"properties.periods[{i}]")
                for i, p in enumerate(periods)
            ),
        )

    narrative = properties.get("detailedForecast")
    if narrative is not None and not isinstance(narrative, str):
        raise DecodeError("Forecast 'detailedForecast' is not a string")
    return Forecast(zone_id=zone_id, detailed_forecast=narrative)


def _decode_period(raw: object, where: str) -> ForecastPeriod:
    if not isinstance(raw, dict):
        raise DecodeError(f"{where} is not an object")
    return ForecastPeriod(
        name=_require_str(raw, "name", where),
        detailed_forecast=_require_str(raw, "detailedForecast", where),
    )


def _require_str(obj: dict, key: str, where: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"Missing '{key}' in {where}")
    return value
