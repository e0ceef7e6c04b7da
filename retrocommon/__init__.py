"""Path, string, UTF and bit-set helpers for emulator front ends."""

__version__ = "0.1.0"
__all__ = ["bits", "compat", "pathfill", "pathio", "paths", "utf"]