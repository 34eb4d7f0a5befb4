"""Running statistics gathered while the simulation runs."""

from dataclasses import dataclass

from .config import FPS


@dataclass
class Statistics:
    """Extremes of velocity and crossing time, plus incident counters."""

    max_vehicles: int = 0
    max_velocity: float = 0.0
    min_velocity: float = 0.0
    max_time: float = 0.0
    min_time: float = 0.0
    average_time: float = 0.0
    close_call_frames: int = 0
    collision_frames: int = 0

    def update_max_vehicles(self, count: int) -> None:
        """Keep the largest vehicle count seen."""
        self.max_vehicles = max(self.max_vehicles, count)

    def record_velocity(self, velocity: float) -> None:
        """Fold one velocity sample into both extremes."""
        self.update_min_velocity(velocity)
        self.update_max_velocity(velocity)

    def update_max_velocity(self, velocity: float) -> None:
        self.max_velocity = max(self.max_velocity, velocity)

    def update_min_velocity(self, velocity: float) -> None:
        # Zero means "not yet recorded".
        if self.min_velocity == 0.0:
            self.min_velocity = velocity
        if velocity < self.min_velocity:
            self.min_velocity = velocity

    def record_time(self, seconds: float) -> None:
        """Fold one crossing time into both extremes."""
        self.update_min_time(seconds)
        self.update_max_time(seconds)

    def update_average_time(self) -> None:
        """Set the average time to the midpoint of the time extremes."""
        self.average_time = abs((self.max_time + self.min_time) / 2.0)

    def update_max_time(self, seconds: float) -> None:
        self.max_time = max(self.max_time, seconds)

    def update_min_time(self, seconds: float) -> None:
        if self.min_time == 0.0:
            self.min_time = seconds
        if seconds < self.min_time:
            self.min_time = seconds

    def add_close_call(self) -> None:
        """Count one car-frame spent in a close call."""
        self.close_call_frames += 1

    def add_collision(self) -> None:
        """Count one car-frame spent in a collision."""
        self.collision_frames += 1

    def close_calls(self) -> int:
        """Close calls: two cars per event, lasting about one second each."""
        return (self.close_call_frames // 2) // FPS

    def collisions(self) -> int:
        """Collisions: two cars per event, lasting about one second each."""
        return (self.collision_frames // 2) // FPS