"""Compact binary serialization: a cursor-based byte stream and codecs for numbers, strings, containers, bitfields, dataclasses and enums."""

__version__ = "0.3.0"