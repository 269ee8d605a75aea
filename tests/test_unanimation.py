import pytest

from marica.unanimation import VJointPos, VPoint, VQuat


def test_quat_addition_is_componentwise_and_commutative():
    a = VQuat(1.0, 2.0, 3.0, 4.0)
    b = VQuat(10.0, 20.0, 30.0, 40.0)
    assert a + b == b + a
    assert (a + b).x == a.x + b.x
    assert (a + b).w == a.w + b.w


def test_quat_subtraction_takes_other_minus_self():
    a = VQuat(1.0, 2.0, 3.0, 4.0)
    b = VQuat(10.0, 20.0, 30.0, 40.0)
    assert (a - b) + a == b
    assert (a - b).x == b.x - a.x


def test_quat_minus_itself_is_zero():
    a = VQuat(1.5, -2.0, 3.25, 4.0)
    assert a - a == VQuat()


def test_quat_in_place_add_returns_sum():
    a = VQuat(1.0, 1.0, 1.0, 1.0)
    original = a
    a += VQuat(2.0, 2.0, 2.0, 2.0)
    assert a == original + VQuat(2.0, 2.0, 2.0, 2.0)
    assert original == VQuat(1.0, 1.0, 1.0, 1.0)


def test_point_arithmetic():
    a = VPoint(1.0, 2.0, 3.0)
    b = VPoint(4.0, 8.0, 16.0)
    assert a + b == b + a
    assert (a - b) + a == b
    assert a - a == VPoint()


def test_point_rejects_other_types():
    with pytest.raises(TypeError):
        VPoint(1.0, 2.0, 3.0) + VQuat()


def test_string_forms():
    assert str(VPoint(1, 2, 3)) == "X: 1 Y: 2 Z: 3"
    assert str(VQuat(1, 2, 3, 4)) == "X: 1 Y: 2 Z: 3 W: 4"


def test_joint_pos_string_has_both_parts():
    joint = VJointPos(VQuat(1, 2, 3, 4), VPoint(5, 6, 7))
    text = str(joint)
    first, second = text.split("\n")
    assert first == "Orientation: " + str(VQuat(1, 2, 3, 4))
    assert second.endswith(str(VPoint(5, 6, 7)))


def test_joint_pos_arithmetic():
    a = VJointPos(VQuat(1, 2, 3, 4), VPoint(5, 6, 7))
    b = VJointPos(VQuat(2, 3, 4, 5), VPoint(8, 9, 10))
    total = a + b
    assert total.orientation == a.orientation + b.orientation
    assert total.position == a.position + b.position
    diff = a - b
    assert diff.orientation == a.orientation - b.orientation
    assert diff.position + a.position == b.position