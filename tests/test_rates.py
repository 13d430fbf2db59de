import pytest

from gachaforge.domain.banners import RateTable, create_gacha_banner
from gachaforge.domain.exceptions import InvalidPityState
from gachaforge.domain.items import Rarity
from gachaforge.domain.rates import (
    is_hard_pity,
    pity_info,
    resolve_banner_rates,
    resolve_rates,
    soft_pity_start,
)

BASE = RateTable(common=0.70, uncommon=0.20, rare=0.07, epic=0.02, legendary=0.01)


def test_soft_pity_starts_at_three_quarters():
    assert soft_pity_start(90) == 67
    assert soft_pity_start(50) == 37
    assert soft_pity_start(1) == 0


def test_base_rates_before_soft_pity():
    for pity in (0, 30, 66):
        assert resolve_rates(BASE, pity, 90) is BASE


def test_hard_pity_is_certain_legendary():
    table = resolve_rates(BASE, 89, 90)
    assert table == RateTable.guaranteed(Rarity.LEGENDARY)
    assert is_hard_pity(89, 90)
    assert not is_hard_pity(88, 90)


def test_soft_pity_starts_from_base_rate():
    assert resolve_rates(BASE, 67, 90).legendary == pytest.approx(BASE.legendary)


def test_soft_pity_reaches_peak_before_hard_pity():
    assert resolve_rates(BASE, 88, 90, peak=0.5).legendary == pytest.approx(0.5)


def test_soft_pity_ramp_is_monotonic_and_normalised():
    previous = 0.0
    for pity in range(0, 89):
        table = resolve_rates(BASE, pity, 90)
        assert table.legendary >= previous
        assert table.total() == pytest.approx(1.0)
        previous = table.legendary


def test_soft_pity_takes_mass_proportionally():
    table = resolve_rates(BASE, 80, 90)
    scale = (1 - table.legendary) / (1 - BASE.legendary)
    assert table.common == pytest.approx(BASE.common * scale)
    assert table.epic == pytest.approx(BASE.epic * scale)
    assert table.common / table.uncommon == pytest.approx(BASE.common / BASE.uncommon)


def test_low_peak_never_lowers_the_rate():
    rich = RateTable(common=0.4, uncommon=0.2, rare=0.1, epic=0.1, legendary=0.2)
    assert resolve_rates(rich, 80, 90, peak=0.1).legendary == pytest.approx(0.2)


def test_degenerate_pity_counter_of_one():
    assert resolve_rates(BASE, 0, 1) == RateTable.guaranteed(Rarity.LEGENDARY)


@pytest.mark.parametrize("pity", [-1, 90, 120])
def test_out_of_range_pity_rejected(pity):
    with pytest.raises(InvalidPityState):
        resolve_rates(BASE, pity, 90)


def test_banner_tuning_fields_are_used():
    banner = create_gacha_banner(
        "Tuned",
        "game-1",
        item_pool=["a"],
        duration=1,
        rates=BASE.as_dict(),
        soft_pity_start_ratio=0.5,
        soft_pity_peak=0.8,
    )
    assert resolve_banner_rates(banner, 44).legendary == pytest.approx(BASE.legendary)
    assert resolve_banner_rates(banner, 88).legendary == pytest.approx(0.8)


def test_pity_info():
    banner = create_gacha_banner("Info", "game-1", item_pool=["a"], duration=1)
    info = pity_info(banner, 70)
    assert info.pity_max == 90
    assert info.pulls_until_guaranteed == 20
    assert info.in_soft_pity
    assert info.progress == pytest.approx(100 * 70 / 90)
    assert not pity_info(banner, 10).in_soft_pity
    assert not pity_info(banner, 89).in_soft_pity
