import logging
import sys
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from datetime import datetime
from typing import Callable, Optional, TextIO

from nalssi.models import Report
from nalssi.presentation import render_report
from nalssi.services.air_quality import fetch_air_quality
from nalssi.services.geocoding import geocode
from nalssi.services.http import HttpClient
from nalssi.services.weather import fetch_weather
from nalssi.utils import now_kst

logger = logging.getLogger(__name__)


def collect(
	city: str,
	client: Optional[HttpClient] = None,
	clock: Callable[[], datetime] = now_kst,
) -> Report:
	"""
	Geocode `city`, then fetch weather and air quality concurrently.

	Both fetches are always awaited before either result is read, and neither is
	cancelled when the other fails. If both fail, the weather error is raised.
	"""
	owns_client = client is None
	if owns_client:
		client = HttpClient()
	try:
		loc = geocode(city, client=client)

		with ThreadPoolExecutor(max_workers=2, thread_name_prefix="nalssi") as pool:
			weather_future = pool.submit(fetch_weather, loc.latitude, loc.longitude, client)
			air_future = pool.submit(fetch_air_quality, loc.latitude, loc.longitude, client)
			wait([weather_future, air_future], return_when=ALL_COMPLETED)
	finally:
		if owns_client:
			client.close()

	# .result() re-raises the fetch error; weather is checked first
	weather = weather_future.result()
	air_quality = air_future.result()
	return Report(location=loc, weather=weather, air_quality=air_quality, observed_at=clock())


def run(city: str, client: Optional[HttpClient] = None, out: Optional[TextIO] = None) -> None:
	report = collect(city, client=client)
	out = out or sys.stdout
	out.write(render_report(report) + "\n")
	logger.info("Report printed for %s", report.location.name)
