from __future__ import annotations

import scamcheck.__main__ as entrypoint


def test_main_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9090")

    entrypoint.main()

    assert calls == [("scamcheck.main:app", {"host": "127.0.0.1", "port": 9090})]
