"""Enumerations shared by the loader and its configuration."""

from sqlloader.schemas.enums import Verb

__all__ = ["Verb"]
