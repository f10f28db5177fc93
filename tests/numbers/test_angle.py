import pytest

from csscolors import Angle


@pytest.mark.parametrize(
    "degrees,expected",
    [(0, 0), (359, 359), (360, 0), (361, 1), (725, 5), (-30, 330)],
)
def test_normalised_on_construction(degrees, expected):
    assert Angle(degrees).degrees == expected


def test_addition_wraps():
    assert Angle(350) + Angle(20) == Angle(10)
    assert Angle(359) + Angle(359) == Angle(358)
    assert Angle(100) + Angle(20) == Angle(120)


def test_subtraction_wraps():
    assert Angle(10) - Angle(30) == Angle(340)
    assert Angle(0) - Angle(359) == Angle(1)
    assert Angle(120) - Angle(20) == Angle(100)


def test_distance_is_shortest_arc():
    assert Angle(359).distance_to(Angle(1)) == 2
    assert Angle(1).distance_to(Angle(359)) == 2
    assert Angle(0).distance_to(Angle(180)) == 180
    assert Angle(90).distance_to(Angle(90)) == 0


def test_display():
    assert str(Angle(6)) == "6"
    assert repr(Angle(6)) == "Angle(6)"


def test_immutable():
    angle = Angle(6)
    with pytest.raises(AttributeError):
        angle._degrees = 7


def test_value_semantics():
    assert Angle(6) == Angle(366)
    assert hash(Angle(6)) == hash(Angle(366))
    assert Angle(6) != Angle(7)
