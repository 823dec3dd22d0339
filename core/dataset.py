# =============================================================================
# core/dataset.py  -  Goals Document Loader
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the JSON goals document once at startup and turns it into an
#   immutable Dataset (see core/models.py).
#
# SHAPE CHECK:
#   Only the top level is checked: "user" must be an object with an id and
#   "goals", "reviews" and "reflections" must be lists.  Records inside the
#   lists are read leniently; missing fields fall back to empty values.
#   The one exception is the review reviewer, which must be exactly one of
#   "reviewer" (a user) or "externalReviewer" (free text).
#
#   Every failure raises LoadError.  Callers treat it as fatal.
# =============================================================================

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from core.errors import LoadError
from core.models import (
    Assessor,
    Dataset,
    DateRange,
    ExternalReviewer,
    Goal,
    GoalStatus,
    InternalReviewer,
    Reflection,
    Review,
    Reviewer,
    User,
)

logger = logging.getLogger(__name__)

REQUIRED_LIST_FIELDS = ("goals", "reviews", "reflections")


def load(path: Union[str, Path]) -> Dataset:
    """Load and shape-check the goals document at ``path``.

    Raises:
        LoadError: if the file is unreadable, is not valid JSON, or lacks
            one of the required top-level fields.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise LoadError(path, f"cannot read file ({e.strerror or e})") from e
    except json.JSONDecodeError as e:
        raise LoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

    dataset = parse_document(document, source=path)
    logger.info(
        "Loaded goals data for user %s: %d goals, %d reviews, %d reflections",
        dataset.user.id, len(dataset.goals), len(dataset.reviews), len(dataset.reflections),
    )
    return dataset


def parse_document(document: Any, source: Union[str, Path] = "<memory>") -> Dataset:
    """Build a Dataset from an already-decoded JSON document."""
    if not isinstance(document, dict):
        raise LoadError(source, "top-level value must be a JSON object")

    missing = [key for key in ("user",) + REQUIRED_LIST_FIELDS if key not in document]
    if missing:
        raise LoadError(source, f"missing required field(s): {', '.join(missing)}")

    for key in REQUIRED_LIST_FIELDS:
        if not isinstance(document[key], list):
            raise LoadError(source, f'"{key}" must be a list')

    raw_user = document["user"]
    if not isinstance(raw_user, dict) or raw_user.get("id") in (None, ""):
        raise LoadError(source, '"user" must be an object with an "id"')

    try:
        return Dataset(
            user=_user(raw_user),
            goals=tuple(_goal(g) for g in document["goals"]),
            reviews=tuple(_review(r) for r in document["reviews"]),
            reflections=tuple(_reflection(r) for r in document["reflections"]),
        )
    except (TypeError, ValueError, AttributeError) as e:
        raise LoadError(source, str(e)) from e


# -----------------------------------------------------------------------------
# Record parsers
# -----------------------------------------------------------------------------

def _id(value: Any) -> str:
    return "" if value is None else str(value)


def _user(raw: Any) -> Optional[User]:
    """A user reference is either a full user object or a bare id."""
    if raw is None:
        return None
    if isinstance(raw, dict):
        return User(
            id=_id(raw.get("id")),
            name=raw.get("name"),
            email=raw.get("email"),
            avatar=raw.get("avatar"),
        )
    return User(id=_id(raw))


def _owner(raw: Any) -> User:
    # Unowned records get an empty id, which never matches the loaded user.
    return _user(raw) or User(id="")


def _opaque(raw: Any) -> tuple:
    # A lone non-list payload is kept whole as a single entry.
    if raw is None:
        return ()
    if isinstance(raw, list):
        return tuple(raw)
    return (raw,)


def _goal(raw: dict) -> Goal:
    status = raw.get("status")
    if isinstance(status, dict):
        status = GoalStatus(tag=str(status.get("tag", "")), date=status.get("date"))
    elif status is not None:
        status = GoalStatus(tag=str(status))

    return Goal(
        id=_id(raw.get("id")),
        title=raw.get("title") or "",
        body=raw.get("body") or "",
        created=raw.get("created"),
        due=raw.get("due"),
        status=status,
        owner=_owner(raw.get("owner")),
        shared_with=tuple(_user(u) for u in raw.get("sharedWith") or () if u is not None),
        action_points=_opaque(raw.get("actionPoints")),
        items=_opaque(raw.get("items")),
    )


def _reviewer(raw: dict) -> Reviewer:
    internal = raw.get("reviewer")
    external = raw.get("externalReviewer")
    if internal is not None and external is not None:
        raise ValueError(f"review {raw.get('id')!r} has both an internal and an external reviewer")
    if internal is not None:
        return InternalReviewer(user=_user(internal))
    if external is not None:
        return ExternalReviewer(identifier=str(external))
    raise ValueError(f"review {raw.get('id')!r} has no reviewer")


def _review(raw: dict) -> Review:
    return Review(
        id=_id(raw.get("id")),
        subject=raw.get("subject") or "",
        date=raw.get("date"),
        inputs=_opaque(raw.get("inputs")),
        professional=_owner(raw.get("professional")),
        reviewer=_reviewer(raw),
    )


def _reflection(raw: dict) -> Reflection:
    period = raw.get("range") or {}
    return Reflection(
        id=_id(raw.get("id")),
        title=raw.get("title") or "",
        created=raw.get("created"),
        range=DateRange(start=period.get("from"), end=period.get("to")),
        inputs=_opaque(raw.get("inputs")),
        user=_owner(raw.get("user")),
        assessors=tuple(
            Assessor(assessed=a.get("assessed") is True, reviewer=_user(a.get("reviewer")))
            for a in raw.get("assessors") or ()
        ),
    )
