# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the goals dataset)
# =============================================================================
#
# These dataclasses define the shape of the goals document after it has been
# loaded.  They carry no behavior.  Every class is frozen and every sequence
# is a tuple: the dataset is built once at startup and never changes.
#
# OPAQUE PAYLOADS:
#   Action points, goal items, review inputs and reflection inputs are kept
#   as the raw JSON values found in the file.  They are passed through to
#   the tool output untouched and are never interpreted here.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# User - the single person the whole dataset is about
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class User:
    """A user referenced by goals, reviews and reflections."""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None


# -----------------------------------------------------------------------------
# Goal
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GoalStatus:
    """Status tag of a goal plus the date it last changed (if known)."""

    tag: str
    date: Optional[str] = None


@dataclass(frozen=True)
class Goal:
    """One personal goal, owned by a user and optionally shared."""

    id: str
    title: str
    owner: User
    body: str = ""
    created: Optional[str] = None          # ISO-8601 timestamp
    due: Optional[str] = None              # ISO-8601 timestamp
    status: Optional[GoalStatus] = None
    shared_with: tuple[User, ...] = ()
    action_points: tuple[Any, ...] = ()    # opaque
    items: tuple[Any, ...] = ()            # opaque


# -----------------------------------------------------------------------------
# Review (feedback) - the reviewer is EITHER an internal user OR an external
# free-text identifier, never both and never neither.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class InternalReviewer:
    """A reviewer who is a known user."""

    user: User


@dataclass(frozen=True)
class ExternalReviewer:
    """A reviewer from outside, known only by a free-text identifier."""

    identifier: str


Reviewer = Union[InternalReviewer, ExternalReviewer]


@dataclass(frozen=True)
class Review:
    """Feedback given to a professional by one reviewer."""

    id: str
    subject: str
    professional: User
    reviewer: Reviewer
    date: Optional[str] = None
    inputs: tuple[Any, ...] = ()           # opaque


# -----------------------------------------------------------------------------
# Reflection
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class DateRange:
    """The period a reflection looks back on."""

    start: Optional[str] = None            # "from" in the JSON document
    end: Optional[str] = None              # "to" in the JSON document


@dataclass(frozen=True)
class Assessor:
    """Someone asked to assess a reflection."""

    assessed: bool = False
    reviewer: Optional[User] = None


@dataclass(frozen=True)
class Reflection:
    """A self-reflection written by a user over a date range."""

    id: str
    title: str
    user: User
    created: Optional[str] = None
    range: DateRange = field(default_factory=DateRange)
    inputs: tuple[Any, ...] = ()           # opaque, mixed text/numeric
    assessors: tuple[Assessor, ...] = ()


# -----------------------------------------------------------------------------
# Dataset - the immutable snapshot handed to the dispatcher
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Dataset:
    """Everything loaded from the goals document."""

    user: User
    goals: tuple[Goal, ...] = ()
    reviews: tuple[Review, ...] = ()
    reflections: tuple[Reflection, ...] = ()
