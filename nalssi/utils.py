from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

# Korea Standard Time has no daylight saving; a fixed offset keeps output
# independent of the host's timezone database.
KST = timezone(timedelta(hours=9), "KST")


def now_kst(now: Optional[datetime] = None) -> datetime:
	"""Return `now` (default: current time) converted to KST. Naive values are taken as UTC."""
	now = now or datetime.now(timezone.utc)
	if now.tzinfo is None:
		now = now.replace(tzinfo=timezone.utc)
	return now.astimezone(KST)


def join_city(words: Iterable[str]) -> str:
	return " ".join(w.strip() for w in words if w and w.strip())
