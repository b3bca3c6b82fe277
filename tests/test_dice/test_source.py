"""Tests for the random die source."""

import pytest
from unittest.mock import patch

from rolldice.dice.exceptions import DiceError, EntropySourceError
from rolldice.dice.source import roll_die


class TestRollDie:
    """Tests for roll_die."""

    @pytest.mark.parametrize("sides", [1, 4, 6, 10, 12, 20, 100])
    def test_values_in_range(self, sides):
        """Rolled values are within 1..sides."""
        for _ in range(200):
            assert 1 <= roll_die(sides) <= sides

    def test_one_sided_die(self):
        assert roll_die(1) == 1

    def test_all_faces_reachable(self):
        """Every face of a d4 shows up over enough rolls."""
        seen = {roll_die(4) for _ in range(500)}
        assert seen == {1, 2, 3, 4}

    @pytest.mark.parametrize("sides", [0, -6])
    def test_non_positive_sides_rejected(self, sides):
        with pytest.raises(ValueError):
            roll_die(sides)

    @patch("rolldice.dice.source._system_random.randint")
    def test_uses_secure_source(self, mock_randint):
        """Test that roll_die draws from the system random source."""
        mock_randint.return_value = 15
        assert roll_die(20) == 15
        mock_randint.assert_called_once_with(1, 20)

    @patch("rolldice.dice.source._system_random.randint")
    def test_entropy_failure_is_wrapped(self, mock_randint):
        """OS random failures surface as EntropySourceError."""
        mock_randint.side_effect = OSError("no entropy")
        with pytest.raises(EntropySourceError) as exc_info:
            roll_die(6)
        assert isinstance(exc_info.value, DiceError)
        assert isinstance(exc_info.value.__cause__, OSError)

    @patch("rolldice.dice.source._system_random.randint")
    def test_unavailable_source_is_wrapped(self, mock_randint):
        mock_randint.side_effect = NotImplementedError("urandom missing")
        with pytest.raises(EntropySourceError):
            roll_die(6)
