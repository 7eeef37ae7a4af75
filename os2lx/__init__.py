"""Reading and dumping OS/2 LX and NE executables, and modelling OS/2 runtime state."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "headers",
    "exe",
    "lxdump",
    "nedump",
    "cli",
    "config",
    "drives",
    "environment",
    "audio",
    "state",
]