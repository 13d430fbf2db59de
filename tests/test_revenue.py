import pytest

from gachaforge.domain.banners import PullCost, create_gacha_banner
from gachaforge.domain.revenue import calculate_banner_revenue


@pytest.fixture()
def banner():
    return create_gacha_banner("Revenue", "game-1", item_pool=["a"], duration=14)


def test_revenue_formula(banner):
    assert calculate_banner_revenue(banner, 20, 1000, 0.01) == pytest.approx(20 * 1000 * 300 * 0.01)


def test_revenue_scales_linearly_with_users(banner):
    base = calculate_banner_revenue(banner, 15, 100, 0.02)
    assert calculate_banner_revenue(banner, 15, 1000, 0.02) == pytest.approx(10 * base)


def test_revenue_uses_pull_cost():
    cheap = create_gacha_banner("Cheap", "g", item_pool=["a"], duration=1, pull_cost=PullCost(gems=150))
    assert calculate_banner_revenue(cheap, 10, 10, 1.0) == pytest.approx(15000)


def test_zero_users_means_zero_revenue(banner):
    assert calculate_banner_revenue(banner, 50, 0, 0.01) == 0


def test_negative_inputs_rejected(banner):
    with pytest.raises(ValueError):
        calculate_banner_revenue(banner, -1, 10, 0.01)
    with pytest.raises(ValueError):
        calculate_banner_revenue(banner, 1, 10, -0.01)
