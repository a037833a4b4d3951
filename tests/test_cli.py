import pytest

from nalssi import cli, config
from nalssi.services.http import HttpClient

from conftest import DummySession


@pytest.fixture
def session(monkeypatch, seoul_routes):
	session = DummySession(seoul_routes)
	monkeypatch.setattr(cli, "HttpClient", lambda: HttpClient(session=session))
	return session


@pytest.mark.parametrize("argv", [["now", "seoul"], ["NOW", "seoul"], ["seoul"]])
def test_main_prints_report(session, capsys, argv):
	assert cli.main(argv) == 0
	out, err = capsys.readouterr()
	assert "서울, 대한민국" in out
	assert "흐림" in out
	assert err == ""
	assert session.closed


def test_main_joins_city_words(session, capsys):
	assert cli.main(["now", "new", "york"]) == 0
	assert session.calls[0]["params"]["name"] == "new york"


@pytest.mark.parametrize("argv", [[], ["now"], ["now", "  "]])
def test_main_without_city_prints_usage(session, capsys, argv):
	assert cli.main(argv) == 1
	out, _ = capsys.readouterr()
	assert out.startswith("Usage:")
	assert session.calls == []


def test_main_reports_failure_on_stderr(session, capsys):
	session.routes[config.GEOCODING_URL] = {"results": []}
	assert cli.main(["now", "atlantis"]) == 1
	out, err = capsys.readouterr()
	assert out == ""
	assert 'error: failed: no results for city: "atlantis"' in err
