# =============================================================================
# core/dispatcher.py  -  Query Dispatcher (the five read-only tools)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the fixed catalog of query tools and routes a call by name:
#
#     list_goals          owner == user, created in range -> goal summaries
#     get_goals_detailed  owner == user, created in range -> full goals
#     get_goal            owner == user, id == goalId     -> one full goal
#     get_feedback        professional == user, date in range -> reviews
#     get_reflections     user == user, created in range  -> reflections
#
#   Every tool filters by ownership FIRST, against the single loaded user.
#   Results come back as pretty-printed JSON text.
#
# SOFT RESULTS vs ERRORS:
#   - No dataset           -> "Data not available..." text, for every tool
#   - get_goal finds none  -> "Goal not found: <id>" text.  A goal that
#                             belongs to someone else is reported the same way.
#   - Unknown tool name    -> UnknownOperationError
#   - Bad arguments        -> InvalidArgumentError / InvalidDateError
#
# The dispatcher is pure Python.  The MCP wrapper lives in tools/.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from core.errors import InvalidArgumentError, UnknownOperationError
from core.filters import filter_by_date_range, filter_by_owner
from core.models import Dataset
from core.serialize import (
    goal_summary,
    goal_to_dict,
    reflection_to_dict,
    review_to_dict,
    to_text,
)

logger = logging.getLogger(__name__)

DATA_NOT_AVAILABLE = "Data not available. The goals dataset could not be loaded."
GOAL_NOT_FOUND = "Goal not found: {goal_id}"


@dataclass(frozen=True)
class ToolSpec:
    """One entry of the tool catalog."""

    name: str
    description: str
    handler: Callable[[Dataset, Mapping[str, Any]], str]


# -----------------------------------------------------------------------------
# Tool handlers
# -----------------------------------------------------------------------------
# Each handler takes the dataset and the raw argument bag and returns text.

def list_goals(dataset: Dataset, args: Mapping[str, Any]) -> str:
    goals = filter_by_owner(dataset.goals, dataset.user.id, "owner")
    goals = filter_by_date_range(goals, args.get("startDate"), args.get("endDate"), "created")
    return to_text([goal_summary(g) for g in goals])


def get_goals_detailed(dataset: Dataset, args: Mapping[str, Any]) -> str:
    goals = filter_by_owner(dataset.goals, dataset.user.id, "owner")
    goals = filter_by_date_range(goals, args.get("startDate"), args.get("endDate"), "created")
    return to_text([goal_to_dict(g) for g in goals])


def get_goal(dataset: Dataset, args: Mapping[str, Any]) -> str:
    goal_id = args.get("goalId")
    if goal_id is None or goal_id == "":
        raise InvalidArgumentError("goalId is required")
    goal_id = str(goal_id)

    own_goals = filter_by_owner(dataset.goals, dataset.user.id, "owner")
    for goal in own_goals:
        if goal.id == goal_id:
            return to_text(goal_to_dict(goal))
    return GOAL_NOT_FOUND.format(goal_id=goal_id)


def get_feedback(dataset: Dataset, args: Mapping[str, Any]) -> str:
    reviews = filter_by_owner(dataset.reviews, dataset.user.id, "professional")
    reviews = filter_by_date_range(reviews, args.get("startDate"), args.get("endDate"), "date")
    return to_text([review_to_dict(r) for r in reviews])


def get_reflections(dataset: Dataset, args: Mapping[str, Any]) -> str:
    reflections = filter_by_owner(dataset.reflections, dataset.user.id, "user")
    reflections = filter_by_date_range(
        reflections, args.get("startDate"), args.get("endDate"), "created"
    )
    return to_text([reflection_to_dict(r) for r in reflections])


# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------
# The descriptions are what the calling LLM reads to decide which tool to use.

TOOL_CATALOG: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="list_goals",
        description=(
            "List the user's goals as short summaries (id, title, created, due, "
            "status). Optionally restrict to goals created between startDate and "
            "endDate (YYYY-MM-DD, both inclusive)."
        ),
        handler=list_goals,
    ),
    ToolSpec(
        name="get_goals_detailed",
        description=(
            "Get the user's goals with every detail: body, status, sharing, action "
            "points and items. Optionally restrict to goals created between "
            "startDate and endDate (YYYY-MM-DD, both inclusive)."
        ),
        handler=get_goals_detailed,
    ),
    ToolSpec(
        name="get_goal",
        description=(
            "Get one of the user's goals by its id (goalId). Reports 'Goal not "
            "found' when the user has no goal with that id."
        ),
        handler=get_goal,
    ),
    ToolSpec(
        name="get_feedback",
        description=(
            "Get the feedback (reviews) the user received. Optionally restrict to "
            "reviews dated between startDate and endDate (YYYY-MM-DD, both inclusive)."
        ),
        handler=get_feedback,
    ),
    ToolSpec(
        name="get_reflections",
        description=(
            "Get the user's reflections, including inputs and assessors. Optionally "
            "restrict to reflections created between startDate and endDate "
            "(YYYY-MM-DD, both inclusive)."
        ),
        handler=get_reflections,
    ),
)


class QueryDispatcher:
    """Routes tool calls by name over an immutable dataset.

    ``dataset`` may be None when loading was skipped or failed; every tool
    then answers with DATA_NOT_AVAILABLE instead of raising.
    """

    def __init__(self, dataset: Optional[Dataset]):
        self.dataset = dataset
        self._tools = {spec.name: spec for spec in TOOL_CATALOG}

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def describe(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """Run tool ``name`` with ``arguments`` and return its text result.

        Raises:
            UnknownOperationError: if ``name`` is not in the catalog.
            InvalidArgumentError: if the arguments are missing or malformed.
        """
        spec = self.describe(name)
        if self.dataset is None:
            logger.warning("%s called but no dataset is loaded", name)
            return DATA_NOT_AVAILABLE
        return spec.handler(self.dataset, arguments or {})
