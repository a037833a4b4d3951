from typing import Optional

from nalssi import config
from nalssi.errors import DecodeError
from nalssi.models import AirQualitySnapshot
from nalssi.services.http import HttpClient


def fetch_air_quality(lat: float, lon: float, client: Optional[HttpClient] = None) -> AirQualitySnapshot:
	"""Current PM10, PM2.5 and US AQI at the given coordinates."""
	owns_client = client is None
	if owns_client:
		client = HttpClient()
	params = {
		"latitude": lat,
		"longitude": lon,
		"timezone": config.FORECAST_TIMEZONE,
		"current": "pm10,pm2_5,us_aqi",
	}
	try:
		data = client.get_json(config.AIR_QUALITY_URL, params, stage="air quality")
	finally:
		if owns_client:
			client.close()
	current = data.get("current")
	if not isinstance(current, dict):
		raise DecodeError("air quality", "missing 'current' block")
	return AirQualitySnapshot.from_payload(current)
