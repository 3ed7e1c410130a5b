"""Offline mirror staging."""

from .stager import OfflineStager, StagedFile

__all__ = ["OfflineStager", "StagedFile"]
