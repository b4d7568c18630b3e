"""Bit depth conversion strategies."""
from spconverter.processing.converters.protocols import BitDepthConverter
from spconverter.processing.converters.int16 import Int16Converter

__all__ = ["BitDepthConverter", "Int16Converter"]
