"""Typed matrices and images with arithmetic, PNM I/O, borders, channels, PSNR and timing helpers."""

__version__ = "0.1.0"