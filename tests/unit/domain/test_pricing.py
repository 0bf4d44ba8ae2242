import pytest

from ecomove.domain.pricing import billable_hours, rental_cost
from ecomove.domain.value_objects.money import Money


@pytest.mark.parametrize("minutes, hours", [(0, 0), (1, 1), (59, 1), (60, 1), (61, 2), (179, 3), (180, 3)])
def test_billable_hours_round_up(minutes, hours):
    assert billable_hours(minutes) == hours


def test_rental_cost_multiplies_rate_by_started_hours():
    assert rental_cost(65, Money.create(3500)) == Money.create(7000)
