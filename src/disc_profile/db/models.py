"""Data models for DISC Profile."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator
from sqlmodel import Column, Field, JSON, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Pydantic Models (for data transfer and validation)
# ============================================================================


class Trait(str, Enum):
    """The four DISC behavioral traits."""

    D = "D"
    I = "I"
    S = "S"
    C = "C"


# Fixed order used to break ties between equal percentages
TRAIT_ORDER: List[Trait] = [Trait.D, Trait.I, Trait.S, Trait.C]

OptionLetter = Literal["A", "B", "C", "D"]


class Answer(BaseModel):
    """A single recorded answer to one question."""

    model_config = ConfigDict(frozen=True)

    question_id: int = PydanticField(ge=1)
    choice: OptionLetter
    trait: Trait
    elapsed_seconds: float = PydanticField(default=0.0, ge=0.0, description="Time spent on the question")


class TraitTally(BaseModel):
    """Raw answer counts per trait."""

    D: int = PydanticField(default=0, ge=0)
    I: int = PydanticField(default=0, ge=0)
    S: int = PydanticField(default=0, ge=0)
    C: int = PydanticField(default=0, ge=0)

    def increment(self, trait: Trait) -> None:
        """Count one more answer for a trait."""
        setattr(self, trait.value, getattr(self, trait.value) + 1)

    def get(self, trait: Trait) -> int:
        return getattr(self, trait.value)

    @property
    def total(self) -> int:
        """Number of answers counted."""
        return self.D + self.I + self.S + self.C


class TraitDistribution(BaseModel):
    """Integer percentage per trait.

    Each value is rounded on its own, so the four values need not add up
    to exactly 100.
    """

    D: int = PydanticField(ge=0, le=100)
    I: int = PydanticField(ge=0, le=100)
    S: int = PydanticField(ge=0, le=100)
    C: int = PydanticField(ge=0, le=100)

    def get(self, trait: Trait) -> int:
        return getattr(self, trait.value)

    def as_dict(self) -> Dict[Trait, int]:
        return {trait: self.get(trait) for trait in TRAIT_ORDER}


class ProfileRanking(BaseModel):
    """Traits ordered from strongest to weakest."""

    order: List[Trait] = PydanticField(min_length=2, max_length=4)

    @property
    def primary(self) -> Trait:
        return self.order[0]

    @property
    def secondary(self) -> Trait:
        return self.order[1]


class NarrativeBundle(BaseModel):
    """Scored profile with its narrative feedback."""

    distribution: TraitDistribution
    ranking: ProfileRanking
    primary_profile: str
    secondary_profile: str
    strengths: List[str] = PydanticField(default_factory=list, max_length=5)
    development_areas: List[str] = PydanticField(default_factory=list, max_length=5)
    behavioral_feedback: str = ""
    secondary_analysis_text: str = ""
    combination_label: str = ""
    combination_influence_points: List[str] = PydanticField(default_factory=list)

    def report_columns(self) -> Dict[str, Any]:
        """Columns stored for a report, named after the backend table."""
        return {
            "d_natural": self.distribution.D,
            "i_natural": self.distribution.I,
            "s_natural": self.distribution.S,
            "c_natural": self.distribution.C,
            "primary_profile": self.primary_profile,
            "secondary_profile": self.secondary_profile,
            "pontos_fortes": list(self.strengths),
            "areas_desenvolver": list(self.development_areas),
            "feedback_comportamental": self.behavioral_feedback,
        }


class StoredReport(BaseModel):
    """A persisted report, from either the remote backend or the local store."""

    id: Optional[str] = None
    user_id: str
    d_natural: int
    i_natural: int
    s_natural: int
    c_natural: int
    primary_profile: str
    secondary_profile: str
    pontos_fortes: List[str] = PydanticField(default_factory=list)
    areas_desenvolver: List[str] = PydanticField(default_factory=list)
    feedback_comportamental: str = ""
    created_at: Optional[datetime] = None

    @field_validator("pontos_fortes", "areas_desenvolver", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("feedback_comportamental", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value


# ============================================================================
# SQLModel Database Models
# ============================================================================


class Respondent(SQLModel, table=True):
    """Person taking the questionnaire."""

    __tablename__ = "respondents"
    __table_args__ = {"extend_existing": True}

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=_utcnow)

    # Relationships
    responses: List["ResponseRecord"] = Relationship(back_populates="respondent")
    reports: List["ReportRecord"] = Relationship(back_populates="respondent")


class ResponseRecord(SQLModel, table=True):
    """Raw answer to a single question."""

    __tablename__ = "user_responses_simple"
    __table_args__ = {"extend_existing": True}

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    user_id: str = Field(foreign_key="respondents.id", index=True)
    question_id: int
    selected_choice: str
    selected_trait: str
    time_spent: float = 0.0
    created_at: datetime = Field(default_factory=_utcnow)

    # Relationships
    respondent: Optional[Respondent] = Relationship(back_populates="responses")


class ReportRecord(SQLModel, table=True):
    """Final report of a completed attempt."""

    __tablename__ = "user_reports_simple"
    __table_args__ = {"extend_existing": True}

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    user_id: str = Field(foreign_key="respondents.id", index=True)
    d_natural: int
    i_natural: int
    s_natural: int
    c_natural: int
    primary_profile: str
    secondary_profile: str
    pontos_fortes: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    areas_desenvolver: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    feedback_comportamental: str = ""
    created_at: datetime = Field(default_factory=_utcnow)

    # Relationships
    respondent: Optional[Respondent] = Relationship(back_populates="reports")

    def to_stored_report(self) -> StoredReport:
        """Convert to StoredReport pydantic model."""
        return StoredReport(
            id=self.id,
            user_id=self.user_id,
            d_natural=self.d_natural,
            i_natural=self.i_natural,
            s_natural=self.s_natural,
            c_natural=self.c_natural,
            primary_profile=self.primary_profile,
            secondary_profile=self.secondary_profile,
            pontos_fortes=self.pontos_fortes or [],
            areas_desenvolver=self.areas_desenvolver or [],
            feedback_comportamental=self.feedback_comportamental,
            created_at=self.created_at,
        )


class ActivityRecord(SQLModel, table=True):
    """Usage event such as a started test or a viewed report."""

    __tablename__ = "user_activity"
    __table_args__ = {"extend_existing": True}

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    action: str
    details: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=_utcnow)
