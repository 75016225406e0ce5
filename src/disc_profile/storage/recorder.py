"""Recording of completed questionnaire attempts."""

from typing import Any, Callable, ContextManager, Dict, List, Optional, Sequence

from pydantic import ValidationError
from sqlmodel import Session

from disc_profile.db.models import Answer, NarrativeBundle, StoredReport
from disc_profile.db.repo import Repository
from disc_profile.db.session import get_session
from disc_profile.storage.remote import RemoteStore, RemoteStoreError
from disc_profile.traits.classifier import TraitClassifier
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)

RESPONSES_TABLE = "user_responses_simple"
REPORTS_TABLE = "user_reports_simple"
ACTIVITY_TABLE = "user_activity"

TEST_COMPLETED = "test_completed_simple"


class ResultRecorder:
    """
    Score attempts and persist them.

    Results go to the remote backend when one is configured. When it is not,
    or when a remote call fails, they are stored in the local database.
    Scoring never depends on storage: the bundle is always returned.
    """

    def __init__(
        self,
        remote: Optional[RemoteStore] = None,
        classifier: Optional[TraitClassifier] = None,
        session_factory: Callable[[], ContextManager[Session]] = get_session,
    ):
        self.remote = remote or RemoteStore()
        self.classifier = classifier or TraitClassifier()
        self.session_factory = session_factory

    def save_test_responses(self, user_id: str, answers: Sequence[Answer]) -> NarrativeBundle:
        """
        Score an attempt and store its answers and report.

        Args:
            user_id: Respondent ID
            answers: Ordered answers of the attempt

        Returns:
            NarrativeBundle for the attempt

        Raises:
            InvalidResponsesError: If no answers are given
        """
        bundle = self.classifier.score(answers)

        if self.remote.enabled:
            try:
                self._save_remote(user_id, answers, bundle)
                return bundle
            except RemoteStoreError as e:
                logger.warning(f"Working offline, storing results locally: {e}")
        else:
            logger.debug("No remote backend configured, storing results locally")

        self._save_local(user_id, answers, bundle)
        return bundle

    def _save_remote(
        self, user_id: str, answers: Sequence[Answer], bundle: NarrativeBundle
    ) -> None:
        rows = [
            {
                "user_id": user_id,
                "question_id": answer.question_id,
                "selected_choice": answer.choice,
                "selected_trait": answer.trait.value,
                "time_spent": answer.elapsed_seconds,
            }
            for answer in answers
        ]
        self.remote.insert(RESPONSES_TABLE, rows)
        self.remote.insert(REPORTS_TABLE, [{"user_id": user_id, **bundle.report_columns()}])
        logger.info(f"Saved attempt for {user_id} to remote backend")

        self.log_activity(user_id, TEST_COMPLETED, {"total_questions": len(answers)})

    def _save_local(
        self, user_id: str, answers: Sequence[Answer], bundle: NarrativeBundle
    ) -> None:
        with self.session_factory() as session:
            repo = Repository(session)
            repo.save_responses(user_id, answers)
            repo.save_report(user_id, bundle)
            repo.log_activity(user_id, TEST_COMPLETED, {"total_questions": len(answers)})
        logger.info(f"Saved attempt for {user_id} to local database")

    def get_reports(self, user_id: str) -> List[StoredReport]:
        """
        Get stored reports for a respondent, newest first.

        Args:
            user_id: Respondent ID

        Returns:
            List of StoredReport
        """
        if self.remote.enabled:
            try:
                rows = self.remote.select(
                    REPORTS_TABLE, filters={"user_id": user_id}, order="created_at.desc"
                )
                return [StoredReport.model_validate(row) for row in rows]
            except RemoteStoreError as e:
                logger.warning(f"Working offline, reading local reports: {e}")
            except ValidationError as e:
                logger.warning(f"Malformed remote reports, reading local reports: {e}")

        with self.session_factory() as session:
            records = Repository(session).get_reports_by_user(user_id)
            return [record.to_stored_report() for record in records]

    def log_activity(
        self, user_id: str, action: str, metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a usage event. Remote failures are logged, never raised.

        Args:
            user_id: Respondent ID
            action: Event name, e.g. "test_started"
            metadata: Optional event details
        """
        if self.remote.enabled:
            try:
                self.remote.insert(
                    ACTIVITY_TABLE,
                    [{"user_id": user_id, "action": action, "metadata": metadata}],
                )
                return
            except RemoteStoreError as e:
                logger.warning(f"Activity '{action}' not recorded remotely: {e}")
                return

        with self.session_factory() as session:
            Repository(session).log_activity(user_id, action, metadata)
