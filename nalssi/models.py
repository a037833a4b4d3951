from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from nalssi.errors import DecodeError


def _required(payload: Dict[str, Any], key: str, cast, stage: str):
	value = payload.get(key)
	if value is None:
		raise DecodeError(stage, f"missing field {key!r}")
	try:
		return cast(value)
	except (TypeError, ValueError) as exc:
		raise DecodeError(stage, f"field {key!r} has invalid value {value!r}") from exc


def _optional(payload: Dict[str, Any], key: str, cast, stage: str):
	if payload.get(key) is None:
		return None
	return _required(payload, key, cast, stage)


def _to_int(value: Any) -> int:
	# Open-Meteo occasionally serializes integral fields as 12.0
	if isinstance(value, bool):
		raise TypeError("bool is not a number")
	number = float(value)
	if not number.is_integer():
		raise ValueError(value)
	return int(number)


@dataclass(frozen=True)
class Location:
	name: str
	country: str
	latitude: float
	longitude: float

	@classmethod
	def from_payload(cls, payload: Dict[str, Any]) -> "Location":
		stage = "geocoding"
		return cls(
			name=_required(payload, "name", str, stage),
			country=payload.get("country") or "",
			latitude=_required(payload, "latitude", float, stage),
			longitude=_required(payload, "longitude", float, stage),
		)


@dataclass(frozen=True)
class WeatherSnapshot:
	temperature_c: float
	apparent_temperature_c: float
	precipitation_probability_pct: int
	weather_code: int
	humidity_pct: Optional[int] = None
	wind_speed_ms: Optional[float] = None

	@classmethod
	def from_payload(cls, current: Dict[str, Any]) -> "WeatherSnapshot":
		stage = "weather"
		return cls(
			temperature_c=_required(current, "temperature_2m", float, stage),
			apparent_temperature_c=_required(current, "apparent_temperature", float, stage),
			precipitation_probability_pct=_required(current, "precipitation_probability", _to_int, stage),
			weather_code=_required(current, "weather_code", _to_int, stage),
			humidity_pct=_optional(current, "relative_humidity_2m", _to_int, stage),
			wind_speed_ms=_optional(current, "wind_speed_10m", float, stage),
		)


@dataclass(frozen=True)
class AirQualitySnapshot:
	pm10: float
	pm25: float
	us_aqi: int

	@classmethod
	def from_payload(cls, current: Dict[str, Any]) -> "AirQualitySnapshot":
		stage = "air quality"
		return cls(
			pm10=_required(current, "pm10", float, stage),
			pm25=_required(current, "pm2_5", float, stage),
			us_aqi=_required(current, "us_aqi", _to_int, stage),
		)


@dataclass(frozen=True)
class Report:
	"""Everything needed to render one summary. Only built once all three lookups succeeded."""

	location: Location
	weather: WeatherSnapshot
	air_quality: AirQualitySnapshot
	observed_at: datetime

	def to_dict(self) -> Dict[str, Any]:
		return {
			"location": asdict(self.location),
			"weather": asdict(self.weather),
			"air_quality": asdict(self.air_quality),
			"observed_at": self.observed_at.isoformat(),
		}
