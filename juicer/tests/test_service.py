"""Tests for the Juicer service."""

import logging

import pytest

from juicer.errors import CapacityError, RottenFruitError
from juicer.models import Apple, Fruit
from juicer.service import Juicer


@pytest.fixture
def juicer():
    """Fresh 20 liter juicer for each test."""
    return Juicer(capacity=20)


class TestJuicer:
    """Test Juicer class."""

    def test_create_juicer(self, juicer):
        assert juicer.capacity == 20.0
        assert juicer.get_total_juice() == 0.0
        assert juicer.get_fruit_count() == 0
        assert juicer.get_remaining_capacity() == 20.0

    def test_add_then_squeeze(self, juicer):
        juicer.add_fruit(Apple("Red", 4.0, rotten=False))
        assert juicer.get_fruit_count() == 1
        assert juicer.get_remaining_capacity() == 16.0

        juice = juicer.squeeze()

        assert juice == 2.0
        assert juicer.get_total_juice() == 2.0
        assert juicer.get_fruit_count() == 0

    def test_squeeze_again_when_empty(self, juicer):
        juicer.add_fruit(Apple("Red", 4.0, rotten=False))
        juicer.squeeze()

        assert juicer.squeeze() is None
        assert juicer.get_total_juice() == 2.0
        assert juicer.get_fruit_count() == 0

    def test_empty_squeeze_logs_notice(self, juicer, caplog):
        with caplog.at_level(logging.INFO, logger="juicer.service"):
            result = juicer.squeeze()

        assert result is None
        assert "No fruits to squeeze." in caplog.messages

    def test_squeeze_takes_oldest_fruit(self, juicer):
        juicer.add_fruit(Fruit("Yellow", 2.0))
        juicer.add_fruit(Fruit("Green", 6.0))

        assert juicer.squeeze() == 1.0
        assert juicer.get_remaining_capacity() == 14.0
        assert juicer.squeeze() == 3.0
        assert juicer.get_total_juice() == 4.0

    def test_squeezed_count(self, juicer):
        juicer.add_fruit(Fruit("Yellow", 2.0))
        juicer.squeeze()
        juicer.squeeze()
        assert juicer.get_squeezed_count() == 1


class TestJuicerErrors:
    """Test error propagation."""

    def test_capacity_error_propagates(self):
        juicer = Juicer(capacity=3)
        with pytest.raises(CapacityError):
            juicer.add_fruit(Apple("Red", 4.0, rotten=False))

        assert juicer.get_fruit_count() == 0
        assert juicer.get_remaining_capacity() == 3.0

    def test_exact_fit_accepted(self):
        juicer = Juicer(capacity=4)
        juicer.add_fruit(Apple("Red", 4.0))
        assert juicer.get_remaining_capacity() == 0.0

    def test_rotten_apple_is_removed_and_discarded(self, juicer):
        juicer.add_fruit(Apple("Red", 3.0, rotten=True))
        juicer.add_fruit(Apple("Red", 2.0, rotten=False))

        with pytest.raises(RottenFruitError):
            juicer.squeeze()

        assert juicer.get_total_juice() == 0.0
        assert juicer.get_fruit_count() == 1
        assert juicer.get_remaining_capacity() == 18.0

        # Next squeeze gets the fresh apple, not the rotten one again
        assert juicer.squeeze() == 1.0
        assert juicer.get_total_juice() == 1.0

    def test_fresh_squeeze_changes_total_by_half_volume(self, juicer):
        for volume in (1.25, 5.99, 3.5):
            juicer.add_fruit(Apple("Red", volume))
        before_count = juicer.get_fruit_count()
        before_total = juicer.get_total_juice()

        juicer.squeeze()

        assert juicer.get_total_juice() == before_total + 1.25 * 0.5
        assert juicer.get_fruit_count() == before_count - 1
