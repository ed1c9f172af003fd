from typing import List, Optional, Sequence, Union

import numpy as np

from jointspy.base_time import Time
from jointspy.joint_state import JointState, JointStateMode
from jointspy.named_vector import NamedVector


class Joints():
    """State of several joints at one instant.

    ``names[i]`` (when names are used) is the name of the joint whose state is
    ``elements[i]``. ``time`` is the instant the states refer to.
    """

    def __init__(
        self,
        names: Optional[List[str]] = None,
        elements: Optional[List[JointState]] = None,
        time: Optional[Time] = None,
    ) -> None:
        self._vector: NamedVector[JointState] = NamedVector(names, elements, element_factory=JointState)
        self.time = time if time is not None else Time()

    @classmethod
    def from_field(
        cls,
        mode: JointStateMode,
        values: Union[Sequence[float], np.ndarray],
        names: Optional[List[str]] = None,
    ) -> "Joints":
        if names is not None and len(names) != len(values):
            raise ValueError(
                f"got {len(names)} names for {len(values)} values"
            )
        elements = []
        for value in values:
            state = JointState()
            state.set_field(mode, value)
            elements.append(state)
        return cls(names, elements)

    @classmethod
    def Positions(cls, values, names: Optional[List[str]] = None) -> "Joints":
        return cls.from_field(JointStateMode.POSITION, values, names)

    @classmethod
    def Speeds(cls, values, names: Optional[List[str]] = None) -> "Joints":
        return cls.from_field(JointStateMode.SPEED, values, names)

    @classmethod
    def Efforts(cls, values, names: Optional[List[str]] = None) -> "Joints":
        return cls.from_field(JointStateMode.EFFORT, values, names)

    @property
    def names(self) -> List[str]:
        return self._vector.names

    @names.setter
    def names(self, names: List[str]) -> None:
        self._vector.names = list(names)

    @property
    def elements(self) -> List[JointState]:
        return self._vector.elements

    @elements.setter
    def elements(self, elements: List[JointState]) -> None:
        self._vector.elements = list(elements)

    def size(self) -> int:
        return self._vector.size()

    def empty(self) -> bool:
        return self._vector.empty()

    def has_names(self) -> bool:
        return self._vector.has_names()

    def has_consistent_names(self) -> bool:
        """Return True if names is empty or has one entry per joint."""
        return self._vector.has_consistent_names()

    def resize(self, num_joints: int) -> None:
        self._vector.resize(num_joints)

    def clear(self) -> None:
        self._vector.clear()

    def map_name_to_index(self, name: str) -> int:
        """Return the index of the joint called ``name``, raising NameNotFound if unknown."""
        return self._vector.map_name_to_index(name)

    def get_element_by_name(self, name: str) -> JointState:
        """Return the state of the joint called ``name``."""
        return self._vector.get_element_by_name(name)

    def set_element_by_name(self, name: str, state: JointState) -> None:
        self._vector.set_element_by_name(name, state)

    def to_array(self, mode: JointStateMode = JointStateMode.POSITION) -> np.ndarray:
        """Return the chosen field of every joint, shape (num_joints,)."""
        return np.array([state.get_field(mode) for state in self.elements], dtype=float)

    def copy(self) -> "Joints":
        return Joints(list(self.names), [state.copy() for state in self.elements], self.time)

    def __len__(self) -> int:
        return len(self._vector)

    def __iter__(self):
        return iter(self._vector)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Joints):
            return NotImplemented
        return self._vector == other._vector and self.time == other.time

    def __repr__(self) -> str:
        return f"Joints(names={self.names!r}, elements={self.elements!r}, time={self.time!r})"
