import pytest

from chromalab.colors.lab import Lab
from chromalab.colors.rgb import Rgb
from chromalab.curves import Knot, from_seg_catmull, from_seg_linear

knot_tolerance = 1e-12


def test_handles_default_to_coord():
    coord = Lab(40.0, 10.0, -5.0)
    knot = Knot(coord)
    assert knot.fore_handle == coord
    assert knot.rear_handle == coord
    assert Knot().coord == Lab()


def test_knot_requires_lab():
    with pytest.raises(TypeError):
        Knot(Rgb())
    with pytest.raises(TypeError):
        Knot(Lab(), fore_handle=(1.0, 2.0, 3.0, 4.0))


def test_mirror_handles():
    knot = Knot(Lab(50.0, 0.0, 0.0), fore_handle=Lab(60.0, 10.0, -4.0))
    knot.mirror_handles_forward()
    assert knot.rear_handle == Lab(40.0, -10.0, 4.0, 1.0)

    knot = Knot(Lab(50.0, 0.0, 0.0), rear_handle=Lab(45.0, 2.0, 2.0))
    knot.mirror_handles_backward()
    assert knot.fore_handle == Lab(55.0, -2.0, -2.0, 1.0)


def test_reverse_swaps_handles():
    fore = Lab(60.0, 1.0, 1.0)
    rear = Lab(40.0, -1.0, -1.0)
    knot = Knot(Lab(50.0, 0.0, 0.0), fore, rear)
    knot.reverse()
    assert knot.fore_handle == rear
    assert knot.rear_handle == fore


def test_copy_is_independent():
    knot = Knot(Lab(50.0, 0.0, 0.0), Lab(60.0, 0.0, 0.0), Lab(40.0, 0.0, 0.0))
    dup = knot.copy()
    assert dup == knot
    dup.reverse()
    assert dup != knot


def test_from_seg_linear_places_handles_at_thirds():
    a = Lab(0.0, 30.0, -60.0, 0.0)
    b = Lab(90.0, -30.0, 30.0, 1.0)
    prev_knot, next_knot = Knot(), Knot()
    from_seg_linear(a, b, prev_knot, next_knot)
    assert prev_knot.coord == a
    assert next_knot.coord == b
    assert prev_knot.fore_handle.is_close(Lab(30.0, 10.0, -30.0, 1.0 / 3.0), knot_tolerance)
    assert next_knot.rear_handle.is_close(Lab(60.0, -10.0, 0.0, 2.0 / 3.0), knot_tolerance)


def test_from_seg_catmull_handles():
    prev, curr, nxt, adv = Lab(0.0, 0.0, 0.0), Lab(30.0, 6.0, 0.0), Lab(60.0, 12.0, 0.0), Lab(90.0, 0.0, 0.0)
    curr_knot, next_knot = Knot(), Knot()
    from_seg_catmull(prev, curr, nxt, adv, 0.0, curr_knot, next_knot)
    # Tightness 0 puts the handles a sixth of the neighbor span away
    assert curr_knot.coord == curr
    assert next_knot.coord == nxt
    assert curr_knot.fore_handle.is_close(Lab(40.0, 8.0, 0.0, 1.0), knot_tolerance)
    assert next_knot.rear_handle.is_close(Lab(50.0, 13.0, 0.0, 1.0), knot_tolerance)


def test_from_seg_catmull_tightness_one_is_linear():
    prev, curr, nxt, adv = Lab(0.0, 0.0, 0.0), Lab(30.0, 6.0, 0.0), Lab(60.0, 12.0, 3.0), Lab(90.0, 0.0, 0.0)
    catmull = (Knot(), Knot())
    linear = (Knot(), Knot())
    from_seg_catmull(prev, curr, nxt, adv, 1.0, *catmull)
    from_seg_linear(curr, nxt, *linear)
    assert catmull == linear


def test_knot_json():
    knot = Knot(Lab(50.0, 0.0, 0.0, 1.0))
    coord = '{"l":50.0000,"a":0.0000,"b":0.0000,"alpha":1.0000}'
    assert knot.to_json_string() == f'{{"coord":{coord},"foreHandle":{coord},"rearHandle":{coord}}}'
