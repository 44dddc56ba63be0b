from time_service import __main__ as entry
from time_service.config import DEFAULT_HOST, DEFAULT_PORT, parse_args


def test_defaults():
    args = parse_args([])

    assert args.port == 3000 == DEFAULT_PORT
    assert args.host == DEFAULT_HOST
    assert args.log_level == "INFO"


def test_port_override():
    args = parse_args(["--port", "8080", "--host", "0.0.0.0"])

    assert args.port == 8080
    assert args.host == "0.0.0.0"


def test_main_passes_app_to_run(monkeypatch):
    calls = []
    monkeypatch.setattr(entry, "run", lambda app, host, port: calls.append((app, host, port)))

    entry.main(["--port", "4000"])

    (app, host, port), = calls
    assert port == 4000
    assert host == DEFAULT_HOST
    assert any(route.path == "/time" for route in app.routes)
