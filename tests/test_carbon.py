import pytest

from macswitch.recommend.carbon import calculate_footprint
from macswitch.recommend.tco import compute_mac, compute_windows


def _footprint(a, years=3):
    return calculate_footprint(a, compute_windows(a, years, 5000), compute_mac(a, years, 3999), years)


def test_default_three_years(default_assumptions):
    fp = _footprint(default_assumptions)
    assert fp.windows_co2_kg == pytest.approx(350.8)
    assert fp.mac_co2_kg == pytest.approx(343.2)
    assert fp.savings_co2_kg == pytest.approx(7.6)
    assert fp.equivalent_trees == pytest.approx(0.2)
    assert fp.description == (
        "Switching to Mac reduces carbon footprint by 7.6 kg CO2, equivalent to 0.2 trees planted"
    )


def test_five_years_saves_more(default_assumptions):
    fp = _footprint(default_assumptions, years=5)
    assert fp.windows_co2_kg == pytest.approx(418.0)
    assert fp.mac_co2_kg == pytest.approx(372.0)
    assert fp.savings_co2_kg == pytest.approx(46.0)
    assert fp.equivalent_trees == pytest.approx(0.9)


def test_equal_watts_gives_similar_footprint(default_assumptions):
    a = default_assumptions.replace(mac_avg_watts=35)
    fp = _footprint(a)
    # Mac manufacturing is 50 kg higher
    assert fp.savings_co2_kg == pytest.approx(-50.0)
    assert fp.description == "Similar carbon footprint"


def test_independent_of_prices(default_assumptions):
    a = default_assumptions
    cheap = calculate_footprint(a, compute_windows(a, 3, 1000), compute_mac(a, 3, 1000), 3)
    dear = calculate_footprint(a, compute_windows(a, 3, 9000), compute_mac(a, 3, 15000), 3)
    assert cheap == dear
