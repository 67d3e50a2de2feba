import pytest

from ptreap import config as pt_config


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in [
        "PTREAP_SEED",
        "PTREAP_PRIORITY_BITS",
        "PTREAP_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _fresh_config():
    pt_config.reset_runtime_config_cache()
    yield
    pt_config.reset_runtime_config_cache()


def test_runtime_config_defaults(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)

    runtime = pt_config.runtime_config()

    assert runtime.seed is None
    assert runtime.deterministic is False
    assert runtime.priority_bits == 31
    assert runtime.max_priority == 2**31 - 1
    assert runtime.log_level == "INFO"


def test_runtime_config_is_cached(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    first = pt_config.runtime_config()
    monkeypatch.setenv("PTREAP_SEED", "5")
    assert pt_config.runtime_config() is first

    pt_config.reset_runtime_config_cache()
    assert pt_config.runtime_config().seed == 5


def test_seed_parsing(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PTREAP_SEED", "123")

    runtime = pt_config.runtime_config()
    assert runtime.seed == 123
    assert runtime.deterministic is True


def test_invalid_seed(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PTREAP_SEED", "not-a-seed")

    with pytest.raises(ValueError, match="not-a-seed"):
        pt_config.runtime_config()


@pytest.mark.parametrize("raw", ["0", "64", "-3"])
def test_priority_bits_out_of_range(monkeypatch: pytest.MonkeyPatch, raw: str):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PTREAP_PRIORITY_BITS", raw)

    with pytest.raises(ValueError):
        pt_config.runtime_config()


def test_priority_bits_override(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PTREAP_PRIORITY_BITS", "8")

    runtime = pt_config.runtime_config()
    assert runtime.priority_bits == 8
    assert runtime.max_priority == 255


def test_log_level_is_normalised(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PTREAP_LOG_LEVEL", " debug ")

    assert pt_config.runtime_config().log_level == "DEBUG"
