# =============================================================================
# main.py  -  Entry Point for the Goals Coaching Agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py path/to/goals.json
#   TRUQU_DATA_PATH=path/to/goals.json truqu-coach
#
# WHAT HAPPENS:
#   1. Checks that the goals document loads (fails fast if it does not)
#   2. Creates the Google ADK agent (agent/coach_agent.py), which spawns
#      the goals tool server over stdio
#   3. Runs an interactive question/answer loop, printing tool calls as the
#      agent makes them
# =============================================================================

import asyncio
import sys

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: LiteLlm reads its API key from the
# environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.coach_agent import create_agent
from core.config import resolve_data_path
from core.dataset import load
from core.errors import ConfigError, LoadError

APP_NAME = "truqu_coach"
USER_ID = "local_user"


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question through the runner and return the last text reply.

    Tool calls are echoed as they stream past.
    """
    message = types.Content(role="user", parts=[types.Part(text=question)])

    reply = ""
    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "function_call", None):
                print(f"  🔧 Calling tool: {part.function_call.name}")
            if getattr(part, "text", None):
                reply = part.text
    return reply


async def run_agent(data_path) -> None:
    """Run the goals coaching agent interactively."""
    print("=" * 70)
    print("  TRUQU GOALS COACH")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent(data_path)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about your goals, feedback or reflections.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)
        final_response = await ask(runner, session.id, user_input)
        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def main() -> None:
    try:
        data_path = resolve_data_path(sys.argv[1:])
        load(data_path)
    except (ConfigError, LoadError) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    asyncio.run(run_agent(data_path))


if __name__ == "__main__":
    main()
