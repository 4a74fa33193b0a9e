import numpy as np
import pytest

from planar2d.shapes import GameObject, PivotMode, Player, Rectangle


def corner(rect, x, y):
    point = rect.model_matrix() @ np.array([x, y, 0.0, 1.0], dtype=np.float32)
    return point[:2]


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw(self, model, color):
        self.calls.append((model, color))


def test_default_rectangle_values():
    rect = Rectangle()
    assert rect.position.tolist() == [0.0, 0.0]
    assert rect.size.tolist() == [50.0, 50.0]
    assert rect.color.tolist() == [0.0, 0.0, 1.0, 1.0]
    assert rect.rotation == 0.0
    assert rect.pivot is PivotMode.CENTER


def test_explicit_rectangle_values():
    rect = Rectangle(3, 4, 10, 20)
    assert rect.position.tolist() == [3.0, 4.0]
    assert rect.size.tolist() == [10.0, 20.0]


def test_unrotated_model_maps_unit_square_onto_rectangle():
    rect = Rectangle(10, 20, 4, 6)
    assert np.allclose(corner(rect, 0, 0), rect.position)
    assert np.allclose(corner(rect, 1, 1), rect.position + rect.size)


def test_half_turn_about_center_swaps_opposite_corners():
    rect = Rectangle(10, 20, 4, 6)
    rect.rotation = 180.0
    assert np.allclose(corner(rect, 0, 0), rect.position + rect.size, atol=1e-4)
    assert np.allclose(corner(rect, 1, 1), rect.position, atol=1e-4)


def test_rotation_with_default_pivot_turns_about_position():
    rect = Rectangle(0, 0, 4, 6)
    rect.pivot = PivotMode.DEFAULT
    rect.rotation = 90.0
    assert np.allclose(corner(rect, 0, 0), [0.0, 0.0], atol=1e-5)
    assert np.allclose(corner(rect, 1, 0), [0.0, 4.0], atol=1e-5)


def test_center_of_rectangle_is_fixed_under_rotation():
    rect = Rectangle(5, 5, 8, 2)
    center_before = corner(rect, 0.5, 0.5)
    rect.rotation = 37.0
    assert np.allclose(corner(rect, 0.5, 0.5), center_before, atol=1e-4)


def test_draw_passes_model_and_color_to_renderer():
    rect = GameObject(1, 2, 3, 4)
    renderer = RecordingRenderer()
    rect.draw(renderer)
    assert len(renderer.calls) == 1
    model, color = renderer.calls[0]
    assert np.allclose(model, rect.model_matrix())
    assert color.tolist() == rect.color.tolist()


def test_game_object_is_a_rectangle():
    obj = GameObject(7, 8, 9, 10)
    assert isinstance(obj, Rectangle)
    assert obj.size.tolist() == [9.0, 10.0]


def test_player_speed_matches_source():
    assert Player().speed == 200


def test_player_move_back_and_forth_returns_to_start():
    player = Player(0, 0, 100, 100)
    player.move(0.25, 1, -1)
    assert player.position.tolist() != [0.0, 0.0]
    player.move(0.25, -1, 1)
    assert np.allclose(player.position, [0.0, 0.0])


def test_player_move_twice_equals_move_with_double_dt():
    first = Player()
    second = Player()
    first.move(0.1, 1, 1)
    first.move(0.1, 1, 1)
    second.move(0.2, 1, 1)
    assert np.allclose(first.position, second.position)


@pytest.mark.parametrize("delta_x, delta_y", [(1, 0), (0, 1), (-1, 0), (0, -1)])
def test_player_moves_only_along_given_axis(delta_x, delta_y):
    player = Player(10, 10, 5, 5)
    player.move(0.5, delta_x, delta_y)
    moved = player.position - np.array([10.0, 10.0])
    assert np.sign(moved[0]) == delta_x
    assert np.sign(moved[1]) == delta_y