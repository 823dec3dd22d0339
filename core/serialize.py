# =============================================================================
# core/serialize.py  -  Records back to JSON
# =============================================================================
#
# Tool results are plain dicts/lists in the same camelCase shape as the goals
# document, rendered as one pretty-printed text block.  Opaque payloads go
# out exactly as they came in.
# =============================================================================

import json
from typing import Any, Optional

from core.models import (
    Assessor,
    ExternalReviewer,
    Goal,
    InternalReviewer,
    Reflection,
    Review,
    User,
)


def user_to_dict(user: Optional[User]) -> Optional[dict]:
    if user is None:
        return None
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "avatar": user.avatar,
    }


def goal_summary(goal: Goal) -> dict:
    """The short form used by list_goals."""
    return {
        "id": goal.id,
        "title": goal.title,
        "created": goal.created,
        "due": goal.due,
        "status": goal.status.tag if goal.status else None,
    }


def goal_to_dict(goal: Goal) -> dict:
    return {
        "id": goal.id,
        "title": goal.title,
        "body": goal.body,
        "created": goal.created,
        "due": goal.due,
        "status": (
            {"tag": goal.status.tag, "date": goal.status.date} if goal.status else None
        ),
        "owner": user_to_dict(goal.owner),
        "sharedWith": [user_to_dict(u) for u in goal.shared_with],
        "actionPoints": list(goal.action_points),
        "items": list(goal.items),
    }


def review_to_dict(review: Review) -> dict:
    result = {
        "id": review.id,
        "subject": review.subject,
        "date": review.date,
        "inputs": list(review.inputs),
        "professional": user_to_dict(review.professional),
    }
    # Only the populated side of the reviewer variant is written out.
    if isinstance(review.reviewer, InternalReviewer):
        result["reviewer"] = user_to_dict(review.reviewer.user)
    elif isinstance(review.reviewer, ExternalReviewer):
        result["externalReviewer"] = review.reviewer.identifier
    return result


def _assessor_to_dict(assessor: Assessor) -> dict:
    return {"assessed": assessor.assessed, "reviewer": user_to_dict(assessor.reviewer)}


def reflection_to_dict(reflection: Reflection) -> dict:
    return {
        "id": reflection.id,
        "title": reflection.title,
        "created": reflection.created,
        "range": {"from": reflection.range.start, "to": reflection.range.end},
        "inputs": list(reflection.inputs),
        "user": user_to_dict(reflection.user),
        "assessors": [_assessor_to_dict(a) for a in reflection.assessors],
    }


def to_text(value: Any) -> str:
    """Render a tool result as indented JSON text."""
    return json.dumps(value, indent=2, ensure_ascii=False)
