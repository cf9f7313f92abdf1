import pytest

from heroential.settings import LAYER_COUNT, Dir, Layer
from heroential.vector import Vec2Int


def test_dir_up_delta_points_to_negative_y():
    assert Dir.UP.delta() == Vec2Int(0, -1)
    assert Dir.RIGHT.delta() == Vec2Int(1, 0)


@pytest.mark.parametrize("direction", list(Dir))
def test_every_delta_is_one_cell(direction):
    assert Dir(direction).delta().length_squared() == 1


@pytest.mark.parametrize(("a", "b"), [(Dir.UP, Dir.DOWN), (Dir.LEFT, Dir.RIGHT)])
def test_opposite_deltas_cancel(a, b):
    assert a.delta() + b.delta() == Vec2Int()


def test_deltas_are_distinct():
    deltas = {Dir(d).delta() for d in Dir}
    assert len(deltas) == 4
    assert Vec2Int(0, 1) in deltas
    assert Vec2Int(-1, 0) in deltas


def test_layers_draw_in_declared_order():
    assert [Layer(i) for i in range(LAYER_COUNT)] == [
        Layer.BACKGROUND,
        Layer.OBJECT,
        Layer.EFFECT,
        Layer.UI,
    ]