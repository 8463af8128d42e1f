"""Line-at-a-time reading from file descriptors: one descriptor (reader) or many (multi)."""

__version__ = "0.1.0"
__all__ = ["multi", "reader"]