from enum import Enum
import math
from typing import List

from jointspy.exceptions import JointStateError


class JointStateMode(Enum):
    POSITION = "position"
    SPEED = "speed"
    EFFORT = "effort"
    RAW = "raw"
    ACCELERATION = "acceleration"


class JointState():
    """State of one joint at one instant.

    Every field defaults to NaN, which means "not set". A command usually sets
    a single field, a measurement may set several of them.
    """

    __slots__ = ("position", "speed", "effort", "raw", "acceleration")

    def __init__(
        self,
        position: float = math.nan,
        speed: float = math.nan,
        effort: float = math.nan,
        raw: float = math.nan,
        acceleration: float = math.nan,
    ) -> None:
        self.position = float(position)
        self.speed = float(speed)
        self.effort = float(effort)
        self.raw = float(raw)
        self.acceleration = float(acceleration)

    @classmethod
    def Position(cls, value: float) -> "JointState":
        return cls(position=value)

    @classmethod
    def Speed(cls, value: float) -> "JointState":
        return cls(speed=value)

    @classmethod
    def Effort(cls, value: float) -> "JointState":
        return cls(effort=value)

    @classmethod
    def Raw(cls, value: float) -> "JointState":
        return cls(raw=value)

    @classmethod
    def Acceleration(cls, value: float) -> "JointState":
        return cls(acceleration=value)

    def get_field(self, mode: JointStateMode) -> float:
        return getattr(self, JointStateMode(mode).value)

    def set_field(self, mode: JointStateMode, value: float) -> None:
        setattr(self, JointStateMode(mode).value, float(value))

    def has_position(self) -> bool:
        return not math.isnan(self.position)

    def has_speed(self) -> bool:
        return not math.isnan(self.speed)

    def has_effort(self) -> bool:
        return not math.isnan(self.effort)

    def has_raw(self) -> bool:
        return not math.isnan(self.raw)

    def has_acceleration(self) -> bool:
        return not math.isnan(self.acceleration)

    def set_modes(self) -> List[JointStateMode]:
        return [mode for mode in JointStateMode if not math.isnan(self.get_field(mode))]

    def is_position(self) -> bool:
        return self.set_modes() == [JointStateMode.POSITION]

    def is_speed(self) -> bool:
        return self.set_modes() == [JointStateMode.SPEED]

    def is_effort(self) -> bool:
        return self.set_modes() == [JointStateMode.EFFORT]

    def is_raw(self) -> bool:
        return self.set_modes() == [JointStateMode.RAW]

    def is_acceleration(self) -> bool:
        return self.set_modes() == [JointStateMode.ACCELERATION]

    def get_mode(self) -> JointStateMode:
        """Return the mode of the only field that is set.

        Raises:
            JointStateError: if no field or more than one field is set.
        """
        modes = self.set_modes()
        if not modes:
            raise JointStateError("no field set in this joint state")
        if len(modes) > 1:
            raise JointStateError(
                "more than one field set in this joint state",
                detail=", ".join(mode.value for mode in modes),
            )
        return modes[0]

    def copy(self) -> "JointState":
        return JointState(self.position, self.speed, self.effort, self.raw, self.acceleration)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, JointState):
            return NotImplemented
        for mode in JointStateMode:
            a, b = self.get_field(mode), other.get_field(mode)
            # two unset fields are equal
            if a != b and not (math.isnan(a) and math.isnan(b)):
                return False
        return True

    __hash__ = None

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{mode.value}={self.get_field(mode)}" for mode in self.set_modes()
        )
        return f"JointState({fields})"
