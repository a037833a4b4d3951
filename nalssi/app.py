import logging
from flask import Flask, request, jsonify

from nalssi import config
from nalssi.aggregator import collect
from nalssi.errors import NalssiError, NotFoundError
from nalssi.presentation import render_report
from nalssi.services.http import HttpClient
from nalssi.utils import join_city

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.json.ensure_ascii = False

# One pooled session for the process; requests.Session.get is safe for concurrent reads
http_client = HttpClient()


@app.get('/api/now')
def api_now():
	city = join_city([request.args.get('city') or ''])
	if not city:
		return jsonify({"error": "city is required"}), 400
	try:
		report = collect(city, client=http_client)
	except NotFoundError as exc:
		logger.info("/api/now no match for %r", city)
		return jsonify({"error": str(exc)}), 404
	except NalssiError as exc:
		logger.exception("/api/now error")
		return jsonify({"error": str(exc)}), 502
	return jsonify({"report": render_report(report), "data": report.to_dict()})


@app.get('/api/health')
def health():
	return jsonify({"status": "ok"})


if __name__ == '__main__':
	app.run(host=config.HOST, port=config.PORT, debug=config.FLASK_DEBUG)
