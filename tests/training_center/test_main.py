import pytest

from training_center import main


def test_run_serves_app_with_configured_address(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(main.uvicorn, 'run', lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(main.config, 'HOST', '0.0.0.0')
    monkeypatch.setattr(main.config, 'PORT', 9000)

    main.run()

    assert calls == [(main.app, {'host': '0.0.0.0', 'port': 9000, 'log_level': main.config.LOG_LEVEL.lower()})]
