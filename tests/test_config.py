import pytest

from harmonynation.config import NationConfig, parse_overrides, with_overrides
from harmonynation.state import initial_state


def test_required_tasks_and_consumption_scale_with_level():
    config = NationConfig()
    assert [config.required_tasks(level) for level in (1, 2, 5)] == [4, 5, 8]
    assert config.food_consumption(1) == pytest.approx(7.0)
    assert config.food_consumption(3) == pytest.approx(11.0)


def test_parse_overrides_coerces_values():
    overrides = parse_overrides(["days_per_level=10", "event_chance=0.5", "label=north", "flag=TRUE"])
    assert overrides == {"days_per_level": 10, "event_chance": 0.5, "label": "north", "flag": True}


def test_parse_overrides_requires_key_value():
    with pytest.raises(ValueError):
        parse_overrides(["days_per_level"])


def test_with_overrides_casts_to_field_type():
    config = with_overrides(NationConfig(), {"days_per_level": 10.0, "invest_cost": 20})
    assert config.days_per_level == 10
    assert isinstance(config.days_per_level, int)
    assert isinstance(config.invest_cost, float)
    assert NationConfig().days_per_level == 30


def test_with_overrides_rejects_unknown_field():
    with pytest.raises(ValueError, match="Unknown config field"):
        with_overrides(NationConfig(), {"gold_reserve": 5})


@pytest.mark.parametrize("pair", ["event_chance=high", "days_per_level=true"])
def test_with_overrides_rejects_non_numeric_values(pair):
    with pytest.raises(ValueError, match="expects"):
        with_overrides(NationConfig(), parse_overrides([pair]))


def test_starting_treasury_flows_into_state():
    state = initial_state(with_overrides(NationConfig(), {"starting_treasury": 250}))
    assert state.treasury == pytest.approx(250.0)
