"""Occupancy grid mapping, frontier exploration, PID control and odometry for small robots."""

__version__ = "0.1.0"
__all__ = ["gridmap", "explorer", "pid", "odometry"]