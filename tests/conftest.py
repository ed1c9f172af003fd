"""Shared fixtures for the jointspy test suite."""
import pytest

from jointspy import JointState, JointsTrajectory, Time


@pytest.fixture
def untimed_trajectory() -> JointsTrajectory:
    """Two named joints, four samples, every sample a distinct position."""
    traj = JointsTrajectory()
    traj.resize(2, 4)
    traj.names = ["a", "b"]
    for i in range(2):
        for t in range(4):
            traj.elements[i][t] = JointState(position=10 * i + t, speed=-(10 * i + t))
    return traj


@pytest.fixture
def timed_trajectory(untimed_trajectory: JointsTrajectory) -> JointsTrajectory:
    untimed_trajectory.times = [Time(1), Time(2), Time(3), Time(4)]
    return untimed_trajectory
