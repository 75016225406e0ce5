"""Repository for database operations."""

from typing import Any, Dict, List, Optional, Sequence

from sqlmodel import Session, select

from disc_profile.db.models import (
    ActivityRecord,
    Answer,
    NarrativeBundle,
    ReportRecord,
    Respondent,
    ResponseRecord,
)
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)


class Repository:
    """Repository for all database operations."""

    def __init__(self, session: Session):
        self.session = session

    # ========================================================================
    # Respondent operations
    # ========================================================================

    def create_respondent(self, name: str, email: str) -> Respondent:
        """Create a new respondent."""
        respondent = Respondent(name=name.strip(), email=email.strip().lower())
        self.session.add(respondent)
        self.session.flush()
        logger.info(f"Created respondent: {respondent.id} ({respondent.email})")
        return respondent

    def get_respondent(self, respondent_id: str) -> Optional[Respondent]:
        """Get respondent by ID."""
        return self.session.get(Respondent, respondent_id)

    def get_respondent_by_email(self, email: str) -> Optional[Respondent]:
        """Get respondent by email."""
        statement = select(Respondent).where(Respondent.email == email.strip().lower())
        return self.session.exec(statement).first()

    def get_or_create_respondent(self, email: str, name: Optional[str] = None) -> Respondent:
        """Get existing respondent or create a new one."""
        respondent = self.get_respondent_by_email(email)
        if respondent is None:
            respondent = self.create_respondent(name or email.split("@")[0], email)
        return respondent

    # ========================================================================
    # Attempt operations
    # ========================================================================

    def save_responses(self, user_id: str, answers: Sequence[Answer]) -> List[ResponseRecord]:
        """Store the raw answers of one attempt."""
        records = [
            ResponseRecord(
                user_id=user_id,
                question_id=answer.question_id,
                selected_choice=answer.choice,
                selected_trait=answer.trait.value,
                time_spent=answer.elapsed_seconds,
            )
            for answer in answers
        ]
        self.session.add_all(records)
        self.session.flush()
        logger.debug(f"Stored {len(records)} responses for user: {user_id}")
        return records

    def get_responses_by_user(self, user_id: str) -> List[ResponseRecord]:
        """Get all stored answers for a user."""
        statement = select(ResponseRecord).where(ResponseRecord.user_id == user_id)
        return list(self.session.exec(statement).all())

    def save_report(self, user_id: str, bundle: NarrativeBundle) -> ReportRecord:
        """Store the report of a completed attempt."""
        report = ReportRecord(user_id=user_id, **bundle.report_columns())
        self.session.add(report)
        self.session.flush()
        logger.info(f"Stored report {report.id} for user: {user_id}")
        return report

    def get_reports_by_user(self, user_id: str) -> List[ReportRecord]:
        """Get all reports for a user, newest first."""
        statement = (
            select(ReportRecord)
            .where(ReportRecord.user_id == user_id)
            .order_by(ReportRecord.created_at.desc())
        )
        return list(self.session.exec(statement).all())

    # ========================================================================
    # Activity operations
    # ========================================================================

    def log_activity(
        self, user_id: str, action: str, details: Optional[Dict[str, Any]] = None
    ) -> ActivityRecord:
        """Record a usage event."""
        activity = ActivityRecord(user_id=user_id, action=action, details=details)
        self.session.add(activity)
        self.session.flush()
        return activity

    def get_activity(self, user_id: str, action: Optional[str] = None) -> List[ActivityRecord]:
        """Get usage events for a user, oldest first."""
        statement = select(ActivityRecord).where(ActivityRecord.user_id == user_id)
        if action:
            statement = statement.where(ActivityRecord.action == action)
        statement = statement.order_by(ActivityRecord.created_at)
        return list(self.session.exec(statement).all())
