"""Core utilities shared by the configuration and syntax layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- syntax

Exports:
    DepthGuard: Nesting depth tracker (indentation and recursion limit)
    depth_clamp: Clamp a depth limit against the interpreter recursion limit

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp

__all__ = ["DepthGuard", "depth_clamp"]
