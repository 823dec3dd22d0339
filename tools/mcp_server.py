# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (all five goals tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the read-only goals tools over MCP.  Each tool is a thin wrapper
#   around core.dispatcher.QueryDispatcher: it logs the call, forwards the
#   arguments and returns the dispatcher's text result.
#
# HOW IT WORKS (the flow):
#   1. An agent discovers the tools (names, descriptions, argument schemas)
#   2. It calls one by name, e.g. "list_goals" with startDate/endDate
#   3. FastMCP routes the call to the matching function below
#   4. The function calls the dispatcher, which filters the loaded dataset
#   5. The agent receives one block of pretty-printed JSON text
#
# STARTUP:
#   The goals document is loaded ONCE, before the server starts.  If the
#   path is missing or the document is broken, the process logs the error
#   and exits with status 1 without ever serving a request.
#
# RUNNING THIS SERVER:
#     python -m tools.mcp_server path/to/goals.json
#     TRUQU_DATA_PATH=path/to/goals.json truqu-mcp
# =============================================================================

import logging
import sys
from typing import Annotated, Optional, Sequence

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.config import log_level, resolve_data_path
from core.dataset import load
from core.dispatcher import QueryDispatcher
from core.errors import ConfigError, InvalidArgumentError, LoadError, UnknownOperationError
from core.models import Dataset

SERVER_NAME = "truqu-mcp"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP message stream and any stray
# output there would corrupt it.
#
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the size of the tool response in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {len(result)} chars{_RESET}")
    return result


# Argument types shared by the date-filtered tools.
StartDate = Annotated[
    Optional[str],
    Field(description="Only include records on or after this date (YYYY-MM-DD)."),
]
EndDate = Annotated[
    Optional[str],
    Field(description="Only include records on or before this date (YYYY-MM-DD)."),
]


# =============================================================================
# Server factory
# =============================================================================
def create_server(dataset: Optional[Dataset]) -> FastMCP:
    """Create the MCP server with all goals tools registered.

    Args:
        dataset: The loaded goals snapshot.  None makes every tool answer
            "Data not available" instead of failing.

    Returns:
        FastMCP server instance.
    """
    dispatcher = QueryDispatcher(dataset)
    mcp = FastMCP(SERVER_NAME)

    def _call(tool_name: str, **arguments) -> str:
        _log_request(tool_name, **arguments)
        try:
            result = dispatcher.call(
                tool_name, {k: v for k, v in arguments.items() if v is not None}
            )
        except (InvalidArgumentError, UnknownOperationError) as e:
            _log_status(f"Rejected: {e}")
            raise ToolError(str(e)) from e
        return _log_response(tool_name, result)

    def _description(tool_name: str) -> str:
        return dispatcher.describe(tool_name).description

    @mcp.tool(name="list_goals", description=_description("list_goals"))
    def list_goals(startDate: StartDate = None, endDate: EndDate = None) -> str:
        return _call("list_goals", startDate=startDate, endDate=endDate)

    @mcp.tool(name="get_goals_detailed", description=_description("get_goals_detailed"))
    def get_goals_detailed(startDate: StartDate = None, endDate: EndDate = None) -> str:
        return _call("get_goals_detailed", startDate=startDate, endDate=endDate)

    @mcp.tool(name="get_goal", description=_description("get_goal"))
    def get_goal(
        goalId: Annotated[str, Field(description="Id of the goal to fetch.")],
    ) -> str:
        return _call("get_goal", goalId=goalId)

    @mcp.tool(name="get_feedback", description=_description("get_feedback"))
    def get_feedback(startDate: StartDate = None, endDate: EndDate = None) -> str:
        return _call("get_feedback", startDate=startDate, endDate=endDate)

    @mcp.tool(name="get_reflections", description=_description("get_reflections"))
    def get_reflections(startDate: StartDate = None, endDate: EndDate = None) -> str:
        return _call("get_reflections", startDate=startDate, endDate=endDate)

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main(argv: Optional[Sequence[str]] = None) -> None:
    """Load the goals document, then serve over stdio until the client quits."""
    load_dotenv()
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    argv = sys.argv[1:] if argv is None else argv

    try:
        dataset = load(resolve_data_path(argv))
    except (ConfigError, LoadError) as e:
        logging.error(f"Failed to start server: {e}")
        sys.exit(1)

    logging.info(f"{SERVER_NAME} running on stdio")
    create_server(dataset).run()


if __name__ == "__main__":
    main()
