import logging
from typing import Optional

from nalssi import config
from nalssi.errors import DecodeError, NotFoundError
from nalssi.models import Location
from nalssi.services.http import HttpClient

logger = logging.getLogger(__name__)


def geocode(city: str, client: Optional[HttpClient] = None) -> Location:
	"""Resolve a free-text city name to the first Open-Meteo match."""
	owns_client = client is None
	if owns_client:
		client = HttpClient()
	params = {
		"name": city,
		"count": 1,
		"language": config.GEOCODING_LANGUAGE,
		"format": "json",
	}
	try:
		data = client.get_json(config.GEOCODING_URL, params, stage="geocoding")
	finally:
		if owns_client:
			client.close()
	results = data.get("results") or []
	if not isinstance(results, list):
		raise DecodeError("geocoding", "'results' is not a list")
	if not results:
		raise NotFoundError(city)
	if not isinstance(results[0], dict):
		raise DecodeError("geocoding", "malformed first result")
	loc = Location.from_payload(results[0])
	logger.info("Resolved %r to %s (%.4f, %.4f)", city, loc.name, loc.latitude, loc.longitude)
	return loc
