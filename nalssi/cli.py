import logging
import sys
from typing import List, Optional

from nalssi import config
from nalssi.aggregator import run
from nalssi.errors import NalssiError
from nalssi.services.http import HttpClient
from nalssi.utils import join_city

logger = logging.getLogger(__name__)


def print_usage() -> None:
	print("Usage:")
	print("  nalssi now <city>")
	print("  nalssi <city>")
	print("")
	print("Examples:")
	print("  nalssi now seoul")
	print('  nalssi now "new york"')


def main(argv: Optional[List[str]] = None) -> int:
	logging.basicConfig(
		level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
		format='%(asctime)s %(levelname)s: %(message)s',
		stream=sys.stderr,
	)
	args = list(sys.argv[1:] if argv is None else argv)
	if args and args[0].lower() == "now":
		args = args[1:]
	city = join_city(args)
	if not city:
		print_usage()
		return 1

	client = HttpClient()
	try:
		run(city, client=client)
	except NalssiError as exc:
		logger.debug("run for %r failed at stage %s", city, exc.stage)
		print(f"error: failed: {exc}", file=sys.stderr)
		return 1
	finally:
		client.close()
	return 0


if __name__ == "__main__":
	sys.exit(main())
