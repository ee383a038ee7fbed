import logging

from tictac.settings import Settings, env_log_level, env_seed


def test_env_seed_parsing(monkeypatch):
    monkeypatch.delenv("TICTAC_SEED", raising=False)
    assert env_seed() is None
    monkeypatch.setenv("TICTAC_SEED", "42")
    assert env_seed() == 42
    monkeypatch.setenv("TICTAC_SEED", "forty-two")
    assert env_seed() is None


def test_cli_seed_overrides_env(monkeypatch):
    monkeypatch.setenv("TICTAC_SEED", "5")
    assert Settings.resolve().seed == 5
    assert Settings.resolve(seed=9).seed == 9


def test_log_level(monkeypatch):
    monkeypatch.delenv("TICTAC_LOG_LEVEL", raising=False)
    assert env_log_level() == logging.INFO
    monkeypatch.setenv("TICTAC_LOG_LEVEL", "warning")
    assert env_log_level() == logging.WARNING
    monkeypatch.setenv("TICTAC_LOG_LEVEL", "nonsense")
    assert env_log_level() == logging.INFO
    assert Settings.resolve(verbose=True).log_level == logging.DEBUG


def test_seeded_rng_is_reproducible():
    a = Settings(seed=3).rng().permutation(9)
    b = Settings(seed=3).rng().permutation(9)
    assert list(a) == list(b)
