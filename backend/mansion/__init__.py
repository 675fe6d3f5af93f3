"""Montes Mystery Mansion: a two-room text adventure engine"""

__version__ = "0.1.0"
