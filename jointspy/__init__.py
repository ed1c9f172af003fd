"""
jointspy
========

Value types for multi-joint robot data: a single-instant ``Joints`` snapshot
and a ``JointsTrajectory`` holding a time series of joint states per joint.
"""

from .base_time import Time
from .joint_state import JointState, JointStateMode
from .named_vector import NamedVector
from .joints import Joints
from .joints_trajectory import JointsTrajectory, JointTrajectory
from .config import LoggingConfig, TrajectoryConfig, TrajectoryFactory
from .logging_utils import setup_logging
from .exceptions import (
    JointsError,
    InvalidTimeStep,
    NameNotFound,
    ShapeError,
    JointStateError,
)

__version__ = "0.1.0"

__all__ = [
    "Time",
    "JointState",
    "JointStateMode",
    "NamedVector",
    "Joints",
    "JointsTrajectory",
    "JointTrajectory",
    "LoggingConfig",
    "TrajectoryConfig",
    "TrajectoryFactory",
    "setup_logging",
    "JointsError",
    "InvalidTimeStep",
    "NameNotFound",
    "ShapeError",
    "JointStateError",
]
