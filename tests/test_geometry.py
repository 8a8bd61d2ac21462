import pytest

from learn2slither.geometry import ACTIONS, Direction, Reward, format_pos, move_pos


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (-1, 0)),
        (Direction.DOWN, (1, 0)),
        (Direction.RIGHT, (0, 1)),
        (Direction.LEFT, (0, -1)),
    ],
)
def test_direction_offsets(direction, expected):
    assert move_pos((0, 0), direction) == expected


@pytest.mark.parametrize(
    "direction, index",
    [
        (Direction.UP, 0),
        (Direction.DOWN, 1),
        (Direction.LEFT, 2),
        (Direction.RIGHT, 3),
    ],
)
def test_index(direction, index):
    assert direction.index() == index
    assert Direction.from_index(index) is direction


def test_actions_cover_all_directions():
    reached = {move_pos((0, 0), action) for action in ACTIONS}
    assert reached == {(-1, 0), (1, 0), (0, -1), (0, 1)}
    assert sorted(Direction.from_index(action.index()).index() for action in ACTIONS) == [
        0,
        1,
        2,
        3,
    ]


@pytest.mark.parametrize("index", range(4))
def test_inverse_is_involution(index):
    direction = Direction.from_index(index)
    inverse = direction.inverse()
    assert inverse.inverse() is direction
    assert inverse.index() != index


def test_inverse_pairs():
    assert Direction.UP.inverse() is Direction.DOWN
    assert Direction.LEFT.inverse() is Direction.RIGHT


@pytest.mark.parametrize("direction", list(Direction))
def test_move_and_back(direction):
    start = (4, 7)
    assert move_pos(move_pos(start, direction), direction.inverse()) == start


def test_move_pos_up():
    assert move_pos((3, 4), Direction.UP) == (2, 4)


def test_format_pos():
    assert format_pos((1, 2)) == "{1, 2}"


@pytest.mark.parametrize(
    "value, member",
    [
        (0, Reward.NOTHING),
        (-1, Reward.EAT_RED),
        (-5, Reward.DIED),
        (5, Reward.EAT_GREEN),
    ],
)
def test_reward_values(value, member):
    assert Reward(value) is member