import pytest

from gachaforge.config import DEFAULT_RATES, GachaForgeConfig


def test_from_env_defaults(monkeypatch):
    for key in ("GACHAFORGE_PITY_COUNTER", "GACHAFORGE_RATES", "GACHAFORGE_RNG_SEED"):
        monkeypatch.delenv(key, raising=False)
    config = GachaForgeConfig.from_env()
    assert config.banner.pity_counter == 90
    assert config.banner.pull_cost_gems == 300
    assert config.banner.rate_up_multiplier == 2.0
    assert dict(config.banner.rates) == dict(DEFAULT_RATES)
    assert config.rng_seed is None


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("GACHAFORGE_PITY_COUNTER", "80")
    monkeypatch.setenv("GACHAFORGE_SOFT_PITY_PEAK", "0.6")
    monkeypatch.setenv("GACHAFORGE_RNG_SEED", "42")
    monkeypatch.setenv("GACHAFORGE_RATES", '{"common": 0.9, "legendary": 0.1}')
    config = GachaForgeConfig.from_env()
    assert config.banner.pity_counter == 80
    assert config.banner.soft_pity_peak == 0.6
    assert config.rng_seed == 42
    assert config.banner.rates == {"common": 0.9, "legendary": 0.1}


def test_from_env_rejects_bad_rates(monkeypatch):
    monkeypatch.setenv("GACHAFORGE_RATES", "[0.5, 0.5]")
    with pytest.raises(ValueError):
        GachaForgeConfig.from_env()
    monkeypatch.setenv("GACHAFORGE_RATES", "{not json")
    with pytest.raises(ValueError):
        GachaForgeConfig.from_env()
