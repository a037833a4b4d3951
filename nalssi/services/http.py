import logging
from typing import Any, Dict, Mapping, Optional

import requests

from nalssi import config
from nalssi.errors import BadStatusError, DecodeError, TransportError

logger = logging.getLogger(__name__)


class HttpClient:
	"""Shared GET-and-decode helper. One session serves every call of a run, including the concurrent ones."""

	def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
		self.session = session or requests.Session()
		# urllib3 rejects non-positive timeouts with a bare ValueError
		self.timeout = timeout if timeout is not None and timeout > 0 else config.HTTP_TIMEOUT_SEC

	def get_json(self, url: str, params: Mapping[str, Any], stage: str) -> Dict[str, Any]:
		logger.debug("%s GET %s params=%s", stage, url, dict(params))
		try:
			resp = self.session.get(url, params=params, timeout=self.timeout)
		except requests.RequestException as exc:
			logger.warning("%s request failed: %s", stage, exc)
			raise TransportError(stage, exc) from exc

		if resp.status_code != 200:
			status = f"{resp.status_code} {resp.reason or ''}".strip()
			logger.warning("%s bad status: %s", stage, status)
			raise BadStatusError(stage, status)

		try:
			data = resp.json()
		except ValueError as exc:
			raise DecodeError(stage, str(exc)) from exc
		if not isinstance(data, dict):
			raise DecodeError(stage, f"expected a JSON object, got {type(data).__name__}")
		return data

	def close(self) -> None:
		self.session.close()
