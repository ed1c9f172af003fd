"""
Custom exceptions for the jointspy library.
"""


class JointsError(Exception):
    """Base exception class for all jointspy errors."""
    def __init__(self, message, *args, detail=None):
        super().__init__(message, *args)
        self.message = message
        self.detail = detail

    def __str__(self):
        base_message = self.message
        if self.detail is not None:
            return f"{base_message} ({self.detail})"
        return base_message


class InvalidTimeStep(JointsError, IndexError):
    """Raised when accessing a trajectory at a non-existing time step."""

    def __init__(self, time_step, num_time_steps=None):
        super().__init__(
            "trying to access time_step which is out of range.",
            detail=f"time_step: {time_step}, time steps: {num_time_steps}",
        )
        self.time_step = time_step
        self.num_time_steps = num_time_steps


class NameNotFound(JointsError, KeyError):
    """Raised when looking up an element by a name that is not registered."""

    def __init__(self, name):
        super().__init__(f"{name!r} was not found in the names list")
        self.name = name

    # KeyError quotes its argument, keep the plain message instead
    def __str__(self):
        return self.message


class ShapeError(JointsError, ValueError):
    """Shape mismatch between joints, samples, names or times."""


class JointStateError(JointsError, ValueError):
    """A joint state does not hold exactly one field for the requested operation."""
