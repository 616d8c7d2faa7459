"""Payload envelope handling."""

from .payload_extractor import PayloadExtractor

__all__ = ["PayloadExtractor"]
