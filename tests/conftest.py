import threading
import time

import pytest

from nalssi import config
from nalssi.services.http import HttpClient

SEOUL_GEO = {
	"results": [
		{"name": "서울", "country": "대한민국", "latitude": 37.566, "longitude": 126.9784},
	]
}

SEOUL_WEATHER = {
	"current": {
		"temperature_2m": 21.3,
		"apparent_temperature": 20.8,
		"relative_humidity_2m": 55,
		"precipitation_probability": 10,
		"weather_code": 1,
		"wind_speed_10m": 2.1,
	}
}

SEOUL_AIR = {"current": {"pm10": 20.0, "pm2_5": 12.0, "us_aqi": 40}}


class DummyResponse:
	def __init__(self, payload=None, status_code: int = 200, reason: str = "OK") -> None:
		self._payload = payload
		self.status_code = status_code
		self.reason = reason

	def json(self):
		if isinstance(self._payload, Exception):
			raise self._payload
		return self._payload


class Route:
	"""Canned answer for one URL: a payload, a DummyResponse, or an exception to raise."""

	def __init__(self, answer, delay: float = 0.0) -> None:
		self.answer = answer
		self.delay = delay


class DummySession:
	def __init__(self, routes: dict) -> None:
		self.routes = routes
		self.calls = []
		self.finished = []
		self.closed = False
		self._lock = threading.Lock()

	def get(self, url: str, params: dict, timeout: float):
		with self._lock:
			self.calls.append({"url": url, "params": dict(params), "timeout": timeout})
		route = self.routes[url]
		if not isinstance(route, Route):
			route = Route(route)
		if route.delay:
			time.sleep(route.delay)
		with self._lock:
			self.finished.append(url)
		if isinstance(route.answer, Exception):
			raise route.answer
		if isinstance(route.answer, DummyResponse):
			return route.answer
		return DummyResponse(route.answer)

	def urls(self):
		return [c["url"] for c in self.calls]

	def close(self) -> None:
		self.closed = True


@pytest.fixture
def seoul_routes():
	return {
		config.GEOCODING_URL: SEOUL_GEO,
		config.FORECAST_URL: SEOUL_WEATHER,
		config.AIR_QUALITY_URL: SEOUL_AIR,
	}


@pytest.fixture
def make_client():
	def _make(routes: dict):
		session = DummySession(routes)
		return HttpClient(session=session, timeout=config.HTTP_TIMEOUT_SEC), session
	return _make
