"""Exporters that write a contact's weekly schedule to calendar files."""

from .base import BaseTransformer
from .ical_transformer import ICalTransformer

__all__ = ["BaseTransformer", "ICalTransformer"]
