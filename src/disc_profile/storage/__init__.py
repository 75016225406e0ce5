"""Persistence of questionnaire results."""

from disc_profile.storage.recorder import ResultRecorder
from disc_profile.storage.remote import RemoteStore, RemoteStoreError

__all__ = [
    "ResultRecorder",
    "RemoteStore",
    "RemoteStoreError",
]
