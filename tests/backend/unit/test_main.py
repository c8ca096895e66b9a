import logging

from bookshop import main
from bookshop.config import settings


def test_run_serves_and_logs_the_configured_port(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    caplog.set_level(logging.INFO, logger="uvicorn.error")

    main.run()

    [(args, kwargs)] = calls
    assert args == ("bookshop.main:app",)
    assert kwargs == {"host": settings.host, "port": settings.port}
    assert f"{settings.host}:{settings.port}" in caplog.text


async def test_startup_does_not_claim_a_listening_port(monkeypatch, caplog):
    async def fake_init_db():
        return None

    monkeypatch.setattr(main, "init_db", fake_init_db)
    caplog.set_level(logging.INFO, logger="uvicorn.error")

    await main.on_startup()

    assert "listening" not in caplog.text
