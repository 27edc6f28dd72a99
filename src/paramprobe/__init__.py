"""
paramprobe - inspect the live parameters of a remote device.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
