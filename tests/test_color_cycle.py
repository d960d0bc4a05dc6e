import numpy as np
import pytest

import constants
from color_cycle import lookup_for_offset


def test_table_has_one_entry_per_phase_step(color_table):
    assert color_table.shape == (1536, 3)
    assert color_table.dtype == np.uint8


def test_first_entry_is_red(color_table):
    assert tuple(int(c) for c in color_table[0]) == (255, 0, 0)


def test_phase_boundaries_hit_primary_and_secondary_hues(color_table):
    assert tuple(color_table[255]) == (255, 255, 0)
    assert tuple(color_table[511]) == (0, 255, 0)
    assert tuple(color_table[767]) == (0, 255, 255)
    assert tuple(color_table[1023]) == (0, 0, 255)
    assert tuple(color_table[1279]) == (255, 0, 255)
    assert tuple(color_table[1535]) == (255, 0, 0)


def test_adjacent_entries_differ_by_at_most_one(color_table):
    table = color_table.astype(int)
    steps = np.abs(np.diff(table, axis=0))
    assert steps.max() <= 1
    # The cycle closes on itself.
    assert np.abs(table[0] - table[-1]).max() <= 1


def test_every_entry_has_a_saturated_channel(color_table):
    assert (color_table.max(axis=1) == 255).all()
    assert (color_table.min(axis=1) == 0).all()


def test_table_is_read_only(color_table):
    with pytest.raises(ValueError):
        color_table[0, 0] = 1


@pytest.mark.parametrize("x, width, offset", [
    (0, 800, 0),
    (123.4, 800, 17),
    (799, 800, 1535),
    (-50, 640, 3),
    (5000, 300, -20),
])
def test_lookup_is_periodic_in_offset(color_table, x, width, offset):
    assert lookup_for_offset(color_table, x, width, offset) == lookup_for_offset(color_table, x, width, offset + 1536)


def test_lookup_spreads_table_over_width(color_table):
    # Half way across a 768px surface lands half way through the table.
    assert lookup_for_offset(color_table, 384, 768, 0) == tuple(int(c) for c in color_table[768])


def test_lookup_adds_rolling_offset(color_table):
    assert lookup_for_offset(color_table, 0, 1536, 10) == tuple(int(c) for c in color_table[10])


def test_lookup_wraps_negative_positions(color_table):
    assert lookup_for_offset(color_table, -1, 1536, 0) == tuple(int(c) for c in color_table[1535])


@pytest.mark.parametrize("x, width", [
    (10, 0),
    (10, -5),
    (float("nan"), 800),
    (float("inf"), 800),
    (10, float("nan")),
])
def test_lookup_falls_back_to_white(color_table, x, width):
    assert lookup_for_offset(color_table, x, width, 0) == constants.FALLBACK_COLOR == (255, 255, 255)
