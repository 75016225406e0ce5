"""Tests for the local database repository."""

from disc_profile.db.models import Trait
from disc_profile.traits.classifier import score_answers


class TestRespondents:
    """Tests for respondent operations."""

    def test_create_respondent(self, repository):
        respondent = repository.create_respondent("  Bruno  ", "Bruno@Example.com")
        assert respondent.id
        assert respondent.name == "Bruno"
        assert respondent.email == "bruno@example.com"

    def test_get_by_email_is_case_insensitive(self, repository, sample_respondent):
        found = repository.get_respondent_by_email("ANA@example.com")
        assert found is not None
        assert found.id == sample_respondent.id

    def test_get_or_create(self, repository, sample_respondent):
        same = repository.get_or_create_respondent("ana@example.com", "Other Name")
        assert same.id == sample_respondent.id
        assert same.name == "Ana Souza"

        created = repository.get_or_create_respondent("carla@example.com")
        assert created.id != sample_respondent.id
        assert created.name == "carla"

    def test_get_respondent(self, repository, sample_respondent):
        assert repository.get_respondent(sample_respondent.id).email == "ana@example.com"
        assert repository.get_respondent("missing") is None


class TestAttempts:
    """Tests for response and report storage."""

    def test_save_responses(self, repository, sample_respondent, make_answers):
        records = repository.save_responses(sample_respondent.id, make_answers(D=2, C=1))
        assert len(records) == 3
        assert [r.selected_choice for r in records] == ["A", "A", "D"]
        assert [r.selected_trait for r in records] == ["D", "D", "C"]
        assert records[0].time_spent == 1.0

    def test_save_report(self, repository, sample_respondent, make_answers):
        bundle = score_answers(make_answers(D=1, I=2, S=1))
        report = repository.save_report(sample_respondent.id, bundle)

        stored = report.to_stored_report()
        assert stored.user_id == sample_respondent.id
        assert (stored.d_natural, stored.i_natural, stored.s_natural, stored.c_natural) == (25, 50, 25, 0)
        assert stored.primary_profile == "Influência"
        assert stored.secondary_profile == "Dominância"
        assert stored.areas_desenvolver == bundle.development_areas
        assert stored.feedback_comportamental == bundle.behavioral_feedback

    def test_reports_filtered_by_user(self, repository, sample_respondent, make_answers):
        other = repository.create_respondent("Davi", "davi@example.com")
        repository.save_report(sample_respondent.id, score_answers(make_answers(D=1)))
        repository.save_report(other.id, score_answers(make_answers(S=1)))

        reports = repository.get_reports_by_user(sample_respondent.id)
        assert len(reports) == 1
        assert reports[0].primary_profile == "Dominância"

    def test_activity(self, repository, sample_respondent):
        repository.log_activity(sample_respondent.id, "test_started")
        repository.log_activity(sample_respondent.id, "report_viewed", {"profile": "Estabilidade"})

        assert len(repository.get_activity(sample_respondent.id)) == 2
        viewed = repository.get_activity(sample_respondent.id, "report_viewed")
        assert viewed[0].details == {"profile": "Estabilidade"}


class TestBundleColumns:
    """Tests for NarrativeBundle.report_columns."""

    def test_columns_match_distribution(self, make_answers):
        bundle = score_answers(make_answers(D=10, I=7, S=5, C=3))
        columns = bundle.report_columns()
        assert columns["d_natural"] == bundle.distribution.get(Trait.D)
        assert columns["c_natural"] == 12
        assert columns["pontos_fortes"] == bundle.strengths
