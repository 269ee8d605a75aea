import numpy as np
import pytest

from marica.skeletal import Bone, Skeletal
from marica.transform import apply_matrix


def test_add_child_links_both_ways():
    parent, child = Bone(), Bone()
    parent.add_child(child)
    assert child.parent is parent
    assert parent.children == (child,)


def test_add_child_twice_keeps_one_link():
    parent, child = Bone(), Bone()
    parent.add_child(child)
    parent.add_child(child)
    assert len(parent.children) == 1


def test_set_parent_registers_child():
    parent, child = Bone(), Bone()
    child.set_parent(parent)
    assert parent.children == (child,)
    assert child.parent is parent


def test_remove_child_clears_parent():
    parent, child = Bone(), Bone()
    parent.add_child(child)
    parent.remove_child(child)
    assert child.parent is None
    assert parent.children == ()


def test_unset_parent_removes_from_parent():
    parent, child = Bone(), Bone()
    parent.add_child(child)
    child.unset_parent()
    assert child.parent is None
    assert parent.children == ()


def test_unset_parent_without_parent_leaves_bone_alone():
    bone = Bone()
    bone.unset_parent()
    assert bone.parent is None


def test_root_global_origin_matrix_is_own_origin():
    bone = Bone()
    bone.origin.location = (1, 2, 3)
    np.testing.assert_allclose(bone.global_origin_matrix(), bone.origin.matrix())


def test_child_global_origin_accumulates_parent_origin():
    parent, child = Bone(), Bone()
    parent.origin.location = (1, 2, 3)
    child.origin.location = (4, 5, 6)
    parent.add_child(child)
    origin = apply_matrix(child.global_origin_matrix(), (0, 0, 0))
    np.testing.assert_allclose(origin, np.add((1, 2, 3), (4, 5, 6)))


def test_global_matrix_ignores_parent():
    parent, child = Bone(), Bone()
    parent.transform.location = (10, 0, 0)
    child.transform.location = (0, 2, 0)
    parent.add_child(child)
    np.testing.assert_allclose(child.global_matrix(), child.transform.matrix())


def test_skeletal_add_and_get():
    skeletal = Skeletal()
    bone = Bone()
    skeletal.add_bone("spine", bone)
    assert skeletal.get_bone("spine") is bone
    assert "spine" in skeletal
    assert len(skeletal) == 1


def test_skeletal_missing_bone_is_none():
    assert Skeletal().get_bone("missing") is None


def test_skeletal_duplicate_name_rejected():
    skeletal = Skeletal()
    skeletal.add_bone("head", Bone())
    with pytest.raises(ValueError):
        skeletal.add_bone("head", Bone())


def test_bone_names_sorted():
    skeletal = Skeletal()
    for name in ["pelvis", "arm", "neck"]:
        skeletal.add_bone(name, Bone())
    assert skeletal.bone_names() == sorted(["pelvis", "arm", "neck"])