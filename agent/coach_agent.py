# =============================================================================
# agent/coach_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the coaching agent: an LLM (via LiteLlm) with a system prompt and
#   one tool source, the truqu-mcp tool server started as a subprocess.
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                   Google ADK Agent                        │
#   │   System prompt ──▶ LLM (LiteLlm) ──▶ MCPToolset (stdio)  │
#   └──────────────────────────────────────────────────────────┘
#                                               │
#                                               ▼
#                               ┌─────────────────────────────┐
#                               │  FastMCP Server             │
#                               │  (tools/mcp_server)         │
#                               │  • list_goals               │
#                               │  • get_goals_detailed       │
#                               │  • get_goal                 │
#                               │  • get_feedback             │
#                               │  • get_reflections          │
#                               └─────────────────────────────┘
#                                               │
#                                               ▼
#                               ┌─────────────────────────────┐
#                               │  core/ (pure Python)        │
#                               └─────────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the server with the current interpreter ("python -m
#   tools.mcp_server <data path>") from the project root, talks to it over
#   stdin/stdout and discovers the five tools automatically.
# =============================================================================

import os
import sys
from pathlib import Path
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_coach_prompt
from core.config import model_name

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def server_parameters(data_path: Path) -> StdioServerParameters:
    """How ADK should spawn the goals tool server."""
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server", str(data_path)],
        cwd=str(PROJECT_ROOT),
        env=dict(os.environ),
    )


def create_agent(data_path: Path, model: Optional[str] = None) -> Agent:
    """Create the goals coaching agent.

    Args:
        data_path: Goals JSON document handed to the tool server.
        model: LiteLlm model string; defaults to TRUQU_MODEL or GPT-4o via
            OpenRouter (LiteLlm reads OPENROUTER_API_KEY itself).

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(connection_params=server_parameters(data_path))

    return Agent(
        name="truqu_goals_coach",
        model=LiteLlm(model=model or model_name()),
        instruction=get_coach_prompt(),
        tools=[mcp_tools],
    )
