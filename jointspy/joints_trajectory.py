import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from jointspy.base_time import Time
from jointspy.exceptions import InvalidTimeStep, ShapeError
from jointspy.joint_state import JointState, JointStateMode
from jointspy.joints import Joints
from jointspy.named_vector import NamedVector

logger = logging.getLogger(__name__)

JointTrajectory = List[JointState]


class JointsTrajectory():
    """Time series of joint states for several, optionally named, joints.

    The state of a joint at a given sample is ``elements[joint_index][sample]``,
    where ``joint_index`` is also the index into ``names``.

    ``times`` optionally holds one time value per sample, shared by all joints.
    Each entry is the interval covered by its sample, so that
    :meth:`get_duration` is the sum of the entries.

    The trajectory is valid when every joint has the same number of samples
    and ``times`` is either empty or has that many entries as well.
    """

    def __init__(
        self,
        names: Optional[List[str]] = None,
        elements: Optional[List[JointTrajectory]] = None,
        times: Optional[List[Time]] = None,
    ) -> None:
        self._vector: NamedVector[JointTrajectory] = NamedVector(names, elements, element_factory=list)
        self.times: List[Time] = list(times) if times is not None else []

    @classmethod
    def from_arrays(
        cls,
        positions: Optional[np.ndarray] = None,
        speeds: Optional[np.ndarray] = None,
        efforts: Optional[np.ndarray] = None,
        names: Optional[List[str]] = None,
        times: Optional[Sequence[Union[Time, int]]] = None,
    ) -> "JointsTrajectory":
        """Build a trajectory from (num_joints, num_samples) arrays.

        Integers given in ``times`` are taken as microseconds.
        """
        fields = {
            JointStateMode.POSITION: positions,
            JointStateMode.SPEED: speeds,
            JointStateMode.EFFORT: efforts,
        }
        fields = {mode: np.atleast_2d(np.asarray(values, dtype=float))
                  for mode, values in fields.items() if values is not None}
        if not fields:
            raise ShapeError("at least one of positions, speeds or efforts is required")

        for values in fields.values():
            if values.ndim != 2:
                raise ShapeError("field arrays must have shape (num_joints, num_samples)", detail=values.shape)

        shapes = {values.shape for values in fields.values()}
        if len(shapes) != 1:
            raise ShapeError("field arrays have different shapes", detail=sorted(shapes))
        num_joints, num_samples = shapes.pop()

        traj = cls()
        traj.resize(num_joints, num_samples)
        for mode, values in fields.items():
            for i in range(num_joints):
                for t in range(num_samples):
                    traj.elements[i][t].set_field(mode, values[i, t])

        if names is not None:
            if len(names) != num_joints:
                raise ShapeError(f"got {len(names)} names for {num_joints} joints")
            traj.names = names
        else:
            traj.names = []

        if times is not None:
            if len(times) != num_samples:
                raise ShapeError(f"got {len(times)} times for {num_samples} samples")
            traj.times = [t if isinstance(t, Time) else Time(t) for t in times]
        return traj

    @property
    def names(self) -> List[str]:
        return self._vector.names

    @names.setter
    def names(self, names: List[str]) -> None:
        self._vector.names = list(names)

    @property
    def elements(self) -> List[JointTrajectory]:
        return self._vector.elements

    @elements.setter
    def elements(self, elements: List[JointTrajectory]) -> None:
        self._vector.elements = list(elements)

    def has_consistent_names(self) -> bool:
        """Return True if names is empty or has one entry per joint."""
        return self._vector.has_consistent_names()

    def map_name_to_index(self, name: str) -> int:
        """Return the index of the joint called ``name``, raising NameNotFound if unknown."""
        return self._vector.map_name_to_index(name)

    def get_element_by_name(self, name: str) -> JointTrajectory:
        """Return the samples of the joint called ``name``."""
        return self._vector.get_element_by_name(name)

    def get_joint_trajectory(self, name: str) -> JointTrajectory:
        return self.get_element_by_name(name)

    def is_valid(self) -> bool:
        """Return True if every joint has the same number of samples and times is empty or matches it."""
        samples = self.get_time_steps()

        for joint in self.elements:
            if len(joint) != samples:
                return False

        if self.times and len(self.times) != samples:
            return False

        return True

    def resize(self, num_joints: int, num_samples: Optional[int] = None) -> None:
        """Resize to ``num_joints`` joints, and each joint to ``num_samples`` samples.

        Without ``num_samples`` the existing joints keep their samples and new
        joints start empty. New samples are default joint states. ``times`` is
        left as is; callers using it must resize it themselves.
        """
        if num_samples is not None and num_samples < 0:
            raise ValueError(f"num_samples must be non-negative, got {num_samples}")
        self._vector.resize(num_joints)
        if num_samples is not None:
            for joint in self.elements:
                if num_samples < len(joint):
                    del joint[num_samples:]
                else:
                    joint.extend(JointState() for _ in range(num_samples - len(joint)))
        logger.debug(f"Resized trajectory to {num_joints} joints, {num_samples} samples")

    def get_joints_at_time_step(self, time_step: int, joints: Optional[Joints] = None) -> Joints:
        """Extract the state of every joint at ``time_step``.

        The result is written into ``joints`` when given (a new
        :class:`Joints` otherwise) and returned. Its elements are copies, so
        changing them leaves the trajectory alone. ``joints.time`` is not
        touched.

        Raises:
            InvalidTimeStep: if ``time_step`` is not in [0, get_time_steps()).
        """
        num_time_steps = self.get_time_steps()
        if time_step < 0 or time_step >= num_time_steps:
            logger.debug(f"Time step {time_step} out of range for {num_time_steps} time steps")
            raise InvalidTimeStep(time_step, num_time_steps)

        if joints is None:
            joints = Joints()
        joints.resize(self.get_number_of_joints())
        joints.names = self.names
        for i, joint in enumerate(self.elements):
            joints.elements[i] = joint[time_step].copy()
        return joints

    def is_timed(self) -> bool:
        """Return True if the samples carry time information."""
        return bool(self.times)

    def get_time_steps(self) -> int:
        """Return the number of samples, taken from the first joint."""
        if self.elements:
            return len(self.elements[0])
        return 0

    def get_number_of_joints(self) -> int:
        """Return the number of joints."""
        return len(self.elements)

    def get_duration(self) -> Time:
        """Return the sum of ``times``, zero for an untimed trajectory."""
        summed = Time()
        for time in self.times:
            summed = summed + time
        return summed

    def to_array(self, mode: JointStateMode = JointStateMode.POSITION) -> np.ndarray:
        """Return the chosen field of every sample, shape (num_joints, num_samples)."""
        if not self.is_valid():
            raise ShapeError("cannot convert an inconsistent trajectory to an array")
        return np.array(
            [[state.get_field(mode) for state in joint] for joint in self.elements],
            dtype=float,
        ).reshape(self.get_number_of_joints(), self.get_time_steps())

    def times_to_seconds(self) -> np.ndarray:
        return np.array([time.to_seconds() for time in self.times], dtype=float)

    def __len__(self) -> int:
        return self.get_number_of_joints()

    def __eq__(self, other) -> bool:
        if not isinstance(other, JointsTrajectory):
            return NotImplemented
        return self._vector == other._vector and self.times == other.times

    def __repr__(self) -> str:
        return (
            f"JointsTrajectory(joints={self.get_number_of_joints()}, "
            f"time_steps={self.get_time_steps()}, timed={self.is_timed()})"
        )
