import pytest

from dungeoneer.compass import Compass, compass_at, compass_label


@pytest.mark.parametrize(
    "position,label",
    [(0, "North"), (1, "East"), (2, "South"), (3, "West")],
)
def test_valid_slots_have_labels(position, label):
    assert compass_label(position) == label
    assert Compass(position).label == label


@pytest.mark.parametrize("position", [-1, 4, 7, 100])
def test_out_of_range_slot_has_no_label(position):
    assert compass_label(position) is None
    assert compass_at(position) is None


def test_opposite_slots():
    assert Compass.NORTH.opposite is Compass.SOUTH
    assert Compass.EAST.opposite is Compass.WEST
    assert Compass.SOUTH.opposite is Compass.NORTH
    assert Compass.WEST.opposite is Compass.EAST


def test_offsets_point_away_from_room():
    assert Compass.NORTH.offset == (0, 1)
    assert Compass.EAST.offset == (1, 0)
    assert Compass.SOUTH.offset == (0, -1)
    assert Compass.WEST.offset == (-1, 0)
    # Opposite walls cancel out
    for slot in Compass:
        dx, dy = slot.offset
        ox, oy = slot.opposite.offset
        assert (dx + ox, dy + oy) == (0, 0)
