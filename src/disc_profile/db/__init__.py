"""Data models and local database for DISC Profile."""

from disc_profile.db.models import (
    ActivityRecord,
    Answer,
    NarrativeBundle,
    ProfileRanking,
    ReportRecord,
    Respondent,
    ResponseRecord,
    StoredReport,
    Trait,
    TraitDistribution,
    TraitTally,
)
from disc_profile.db.session import get_engine, get_session, init_db
from disc_profile.db.repo import Repository

__all__ = [
    # Data transfer models
    "Trait",
    "Answer",
    "TraitTally",
    "TraitDistribution",
    "ProfileRanking",
    "NarrativeBundle",
    "StoredReport",
    # Tables
    "Respondent",
    "ResponseRecord",
    "ReportRecord",
    "ActivityRecord",
    # Session
    "get_engine",
    "get_session",
    "init_db",
    # Repository
    "Repository",
]
