import logging
import math
import os
from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

logger = logging.getLogger(__name__)


def _env_number(name: str, default, cast, minimum=None):
	"""Read a numeric setting; unparsable or out-of-range values fall back to `default`."""
	raw = os.getenv(name, "").strip()
	if not raw:
		return default
	try:
		value = cast(raw)
		if isinstance(value, float) and not math.isfinite(value):
			raise ValueError(raw)
	except ValueError:
		logger.warning("Ignoring %s=%r: not a number", name, raw)
		return default
	if minimum is not None and value <= minimum:
		logger.warning("Ignoring %s=%r: must be greater than %s", name, raw, minimum)
		return default
	return value


# Flask settings
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "false").strip().lower() == "true"
HOST = os.getenv("HOST", "").strip() or "127.0.0.1"
PORT = _env_number("PORT", 5000, int, minimum=0)

# Logging (stdout is reserved for the report)
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

# HTTP
DEFAULT_HTTP_TIMEOUT_SEC = 8.0
HTTP_TIMEOUT_SEC = _env_number("HTTP_TIMEOUT_SEC", DEFAULT_HTTP_TIMEOUT_SEC, float, minimum=0)

# Open-Meteo endpoints
GEOCODING_URL = os.getenv("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
AIR_QUALITY_URL = os.getenv("AIR_QUALITY_URL", "https://air-quality-api.open-meteo.com/v1/air-quality")

# Geocoding result language, server-side day boundary zone
GEOCODING_LANGUAGE = os.getenv("GEOCODING_LANGUAGE", "ko")
FORECAST_TIMEZONE = os.getenv("FORECAST_TIMEZONE", "Asia/Seoul")
