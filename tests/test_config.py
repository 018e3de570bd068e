import config


def test_float_env_default(monkeypatch):
    monkeypatch.delenv("NOWPLAYING_TEST_VALUE", raising=False)
    assert config._float_env("NOWPLAYING_TEST_VALUE", 2.5) == 2.5


def test_float_env_reads_value(monkeypatch):
    monkeypatch.setenv("NOWPLAYING_TEST_VALUE", "0.25")
    assert config._float_env("NOWPLAYING_TEST_VALUE", 1.0) == 0.25


def test_float_env_rejects_garbage(monkeypatch, caplog):
    monkeypatch.setenv("NOWPLAYING_TEST_VALUE", "fast")
    assert config._float_env("NOWPLAYING_TEST_VALUE", 1.0) == 1.0
    assert "NOWPLAYING_TEST_VALUE" in caplog.text


def test_float_env_rejects_non_positive(monkeypatch):
    monkeypatch.setenv("NOWPLAYING_TEST_VALUE", "-3")
    assert config._float_env("NOWPLAYING_TEST_VALUE", 1.0) == 1.0
