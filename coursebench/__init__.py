"""Coursework exercises: bit patterns, floats, stacks and queues, and BMP processing."""

__version__ = "0.1.0"

__all__ = [
    "binary",
    "twos_complement",
    "floats",
    "float_experiments",
    "stacks",
    "queues",
    "menu",
    "metrics",
    "bmp",
    "bmp_cli",
]