from typing import Optional

from nalssi import config
from nalssi.errors import DecodeError
from nalssi.models import WeatherSnapshot
from nalssi.services.http import HttpClient

CURRENT_FIELDS = [
	"temperature_2m",
	"apparent_temperature",
	"relative_humidity_2m",
	"precipitation_probability",
	"weather_code",
	"wind_speed_10m",
]


def fetch_weather(lat: float, lon: float, client: Optional[HttpClient] = None) -> WeatherSnapshot:
	owns_client = client is None
	if owns_client:
		client = HttpClient()
	params = {
		"latitude": lat,
		"longitude": lon,
		"timezone": config.FORECAST_TIMEZONE,
		"wind_speed_unit": "ms",
		"current": ",".join(CURRENT_FIELDS),
	}
	try:
		data = client.get_json(config.FORECAST_URL, params, stage="weather")
	finally:
		if owns_client:
			client.close()
	current = data.get("current")
	if not isinstance(current, dict):
		raise DecodeError("weather", "missing 'current' block")
	return WeatherSnapshot.from_payload(current)
