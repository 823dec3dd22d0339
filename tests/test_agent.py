"""
Tests for agent/ - prompt construction and tool-server launch parameters.

No LLM calls are made.
"""

import sys
from datetime import date
from pathlib import Path

from agent.coach_agent import PROJECT_ROOT, server_parameters
from agent.prompt import get_coach_prompt


class TestPrompt:

    def test_injects_today(self):
        assert date.today().isoformat() in get_coach_prompt()

    def test_mentions_every_tool(self):
        prompt = get_coach_prompt()
        for name in ("list_goals", "get_goals_detailed", "get_goal", "get_feedback", "get_reflections"):
            assert name in prompt


class TestServerParameters:

    def test_spawns_tool_server_module(self):
        params = server_parameters(Path("/data/goals.json"))
        assert params.command == sys.executable
        assert params.args == ["-m", "tools.mcp_server", str(Path("/data/goals.json"))]
        assert params.cwd == str(PROJECT_ROOT)
