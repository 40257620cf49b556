# =============================================================================
# main.py  —  Entry Point for the PackAI Packing Advisor
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env and builds Settings (core/config.py)
#   2. Creates the Google ADK agent (agent/packing_agent.py)
#   3. Runs an interactive console loop: each line you type goes to the
#      agent, which asks follow-up questions and calls the MCP tools
#      (destination search → forecast → packing list)
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: Manages the agent's execution lifecycle
#   - SessionService: Keeps the conversation across turns
#   - Content/Part: ADK's message format
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load .env BEFORE anything reads the environment (Settings, LiteLlm keys).
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.packing_agent import create_agent
from core.config import load_settings

APP_NAME = "packing_advisor"
USER_ID = "traveler"


async def run_agent():
    """Run the packing advisor agent interactively."""
    print("=" * 70)
    print("  PACKAI — SMART TRAVEL PACKING")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")

    settings = load_settings()
    agent = create_agent(settings)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    weather_source = "live Open-Meteo" if settings.use_live_weather else "mock"
    print(f"✅ Agent ready ({weather_source} forecasts).\n")
    print("💬 Tell me where and when you're traveling, and what you plan to do.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Safe travels!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Safe travels!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
