"""am2rlauncher - cross-platform operations for the AM2R launcher."""

__version__ = "0.1.0"
