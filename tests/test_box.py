import pytest

from chartkit.box import BOX_ZERO, Box, BoxCorners, Point, new_box


def _square_corners():
    return BoxCorners(
        top_left=Point(5, 5),
        top_right=Point(15, 5),
        bottom_right=Point(15, 15),
        bottom_left=Point(5, 15),
    )


def test_clone_equals():
    a = Box(top=5, left=5, right=15, bottom=15)
    b = Box(top=a.top, left=a.left, right=a.right, bottom=a.bottom)
    assert a.equals(b)
    assert b.equals(a)
    assert a == b


def test_equals():
    a = Box(top=5, left=5, right=15, bottom=15)
    b = Box(top=10, left=10, right=30, bottom=30)
    c = Box(top=5, left=5, right=15, bottom=15)
    assert a.equals(a)
    assert a.equals(c)
    assert c.equals(a)
    assert not a.equals(b)
    assert not c.equals(b)
    assert not b.equals(a)
    assert not b.equals(c)


def test_is_bigger_than():
    a = Box(top=5, left=5, right=25, bottom=25)
    b = Box(top=10, left=10, right=20, bottom=20)
    c = Box(top=1, left=1, right=30, bottom=30)
    assert a.is_bigger_than(b)
    assert not a.is_bigger_than(c)
    assert c.is_bigger_than(a)


def test_is_smaller_than():
    a = Box(top=5, left=5, right=25, bottom=25)
    b = Box(top=10, left=10, right=20, bottom=20)
    c = Box(top=1, left=1, right=30, bottom=30)
    assert not a.is_smaller_than(b)
    assert a.is_smaller_than(c)
    assert not c.is_smaller_than(a)


def test_grow():
    a = Box(top=1, left=2, right=15, bottom=15)
    b = Box(top=4, left=5, right=30, bottom=35)
    c = a.grow(b)
    assert not c.equals(b)
    assert not c.equals(a)
    assert (c.top, c.left, c.right, c.bottom) == (1, 2, 30, 35)


def test_fit():
    a = Box(top=64, left=64, right=192, bottom=192)
    b = Box(top=16, left=16, right=256, bottom=170)
    c = Box(top=16, left=16, right=170, bottom=256)

    fab = a.fit(b)
    assert fab.left == a.left
    assert fab.right == a.right
    assert fab.top < fab.bottom
    assert fab.left < fab.right
    assert abs(b.aspect() - fab.aspect()) < 0.02

    fac = a.fit(c)
    assert fac.top == a.top
    assert fac.bottom == a.bottom
    assert abs(c.aspect() - fac.aspect()) < 0.02


def test_fit_same_aspect_returns_same_box():
    a = Box(top=0, left=0, right=100, bottom=100)
    square = Box(right=10, bottom=10)
    assert a.fit(square) == a


def test_constrain():
    a = Box(top=64, left=64, right=192, bottom=192)
    b = Box(top=16, left=16, right=256, bottom=170)
    c = Box(top=16, left=16, right=170, bottom=256)

    cab = a.constrain(b)
    assert (cab.top, cab.left, cab.right, cab.bottom) == (64, 64, 192, 170)

    cac = a.constrain(c)
    assert (cac.top, cac.left, cac.right, cac.bottom) == (64, 64, 170, 192)


def test_outer_constrain():
    box = new_box(0, 0, 100, 100)
    canvas = new_box(5, 5, 95, 95)
    taller = new_box(-10, 5, 50, 50)

    c = canvas.outer_constrain(box, taller)
    assert (c.top, c.left, c.right, c.bottom) == (15, 5, 95, 95), str(c)

    wider = new_box(5, 5, 110, 50)
    d = canvas.outer_constrain(box, wider)
    assert (d.top, d.left, d.right, d.bottom) == (5, 5, 85, 95), str(d)


def test_shift():
    b = Box(top=5, left=5, right=10, bottom=10)
    shifted = b.shift(1, 2)
    assert (shifted.top, shifted.left, shifted.right, shifted.bottom) == (7, 6, 11, 12)


def test_center():
    b = Box(top=10, left=10, right=20, bottom=30)
    assert b.center() == (15, 20)


def test_corners_center():
    assert _square_corners().center() == (10, 10)


def test_corners_rotate():
    rotated = _square_corners().rotate(45)
    assert rotated.top_left == Point(10, 3), str(rotated)


def test_corners_round_trip():
    b = Box(top=3, left=4, right=20, bottom=40)
    corners = b.corners()
    assert corners.to_box() == b
    assert corners.width() == b.width()
    assert corners.height() == b.height()


def test_is_zero_and_box_zero():
    assert Box().is_zero()
    assert not BOX_ZERO.is_zero()
    assert not new_box(0, 0, 0, 0).is_zero()
    assert not Box(top=1).is_zero()


def test_getters_use_defaults_only_when_unset():
    unset = Box()
    assert unset.get_top(7) == 7
    assert unset.get_left(8) == 8
    assert unset.get_right(9) == 9
    assert unset.get_bottom(11) == 11
    assert BOX_ZERO.get_top(7) == 0
    assert Box(top=3).get_top(7) == 3


def test_width_height_are_absolute():
    b = Box(top=30, left=20, right=10, bottom=10)
    assert b.width() == 10
    assert b.height() == 20


def test_string_forms():
    assert str(Box(top=1, left=2, right=3, bottom=4)) == "box(1,2,3,4)"
    assert str(Point(1, 2)) == "P{1,2}"


def test_point_distance():
    assert Point(0, 0).distance_to(Point(3, 4)) == pytest.approx(5.0)


def test_aspect_zero_height():
    flat_aspect = Box(right=10).aspect()
    empty_aspect = Box().aspect()
    assert flat_aspect == float("inf")
    assert str(empty_aspect) == "nan"


@pytest.mark.parametrize(
    "box, message",
    [
        (Box(left=-1), "left"),
        (Box(right=-1), "right"),
        (Box(top=-1), "top"),
        (Box(bottom=-1), "bottom"),
    ],
)
def test_validate_rejects_negative(box, message):
    with pytest.raises(ValueError, match=message):
        box.validate()


def test_validate_accepts_positive():
    box = Box(top=1, left=1, right=2, bottom=2)
    box.validate()
    assert box.width() == 1