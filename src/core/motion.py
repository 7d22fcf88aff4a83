# core/motion.py
from core.vector import Vector3

class Timespan:
    """
    Closed interval [start, end] over which a moving primitive's position
    is defined.
    """
    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end

    def difference(self) -> float:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"Timespan({self.start}, {self.end})"


class Trajectory:
    """
    Straight-line motion from `start` to `end` over a timespan.
    """
    def __init__(self, start: Vector3, end: Vector3, timespan: Timespan):
        if timespan.difference() == 0:
            raise ValueError(f"Trajectory needs a non-empty timespan, got {timespan!r}")
        self.start = start
        self.end = end
        self.timespan = timespan

    def position(self, time: float) -> Vector3:
        fraction = (time - self.timespan.start) / self.timespan.difference()
        return self.start + (self.end - self.start) * fraction
