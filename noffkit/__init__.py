"""Read COFF executables, write NOFF executables, and load NOFF images and serve console system calls."""

__version__ = "0.1.0"