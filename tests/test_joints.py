"""Unit tests for the Joints snapshot."""
import numpy as np
import pytest

from jointspy import Joints, JointState, JointStateMode, Time


class TestJoints:

    def test_default(self):
        joints = Joints()
        assert joints.empty()
        assert joints.time == Time()

    def test_factories(self):
        joints = Joints.Positions([0.1, 0.2], names=["a", "b"])
        assert joints.size() == 2
        assert joints.get_element_by_name("b") == JointState.Position(0.2)
        assert Joints.Speeds([1.0]).elements[0].is_speed()
        assert Joints.Efforts(np.array([1.0, 2.0])).elements[1].is_effort()

    def test_factory_name_mismatch(self):
        with pytest.raises(ValueError):
            Joints.Positions([0.1, 0.2], names=["a"])

    def test_resize(self):
        joints = Joints.Positions([1.0], names=["a"])
        joints.resize(3)
        assert joints.names == ["a", "", ""]
        assert joints.elements[2] == JointState()
        assert joints.has_consistent_names()

    def test_to_array(self):
        joints = Joints([], [JointState(position=1.0, speed=2.0), JointState(position=3.0)])
        np.testing.assert_array_equal(joints.to_array(), [1.0, 3.0])
        speeds = joints.to_array(JointStateMode.SPEED)
        assert speeds[0] == 2.0
        assert np.isnan(speeds[1])

    def test_copy(self):
        joints = Joints.Positions([1.0], names=["a"])
        joints.time = Time(5)
        other = joints.copy()
        assert other == joints
        other.elements[0].position = 9.0
        other.names[0] = "z"
        assert joints.elements[0].position == 1.0
        assert joints.names == ["a"]
        assert list(joints) == joints.elements
