from typing import Optional


class NalssiError(Exception):
	"""Base error for a failed lookup. `stage` names the upstream call that failed."""

	def __init__(self, message: str, stage: Optional[str] = None):
		super().__init__(message)
		self.stage = stage


class TransportError(NalssiError):
	"""Connection failure or timeout."""

	def __init__(self, stage: str, cause: Exception):
		super().__init__(f"{stage} request failed: {cause}", stage)
		self.cause = cause


class BadStatusError(NalssiError):
	def __init__(self, stage: str, status: str):
		super().__init__(f"{stage} bad status: {status}", stage)
		self.status = status


class DecodeError(NalssiError):
	"""Malformed JSON or a payload missing required fields."""

	def __init__(self, stage: str, detail: str):
		super().__init__(f"{stage} decode failed: {detail}", stage)
		self.detail = detail


class NotFoundError(NalssiError):
	def __init__(self, query: str):
		super().__init__(f'no results for city: "{query}"', "geocoding")
		self.query = query
