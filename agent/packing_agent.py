# =============================================================================
# agent/packing_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that talks to the traveler, calls the MCP
#   tools, and presents the packing list.
#
# ARCHITECTURE:
#
#   ┌────────────────────────────┐      stdio       ┌──────────────────────┐
#   │  Google ADK Agent          │ ───────────────▶ │  FastMCP Server      │
#   │  prompt + LiteLlm model    │                  │  (tools/mcp_server)  │
#   └────────────────────────────┘                  └──────────┬───────────┘
#                                                              │
#                                                              ▼
#                                                   ┌──────────────────────┐
#                                                   │  core/ (pure Python) │
#                                                   └──────────────────────┘
#
# MODEL:
#   The model string comes from Settings.llm_model (PACKING_LLM_MODEL),
#   default "openrouter/openai/gpt-4o".  LiteLlm reads the provider key
#   (e.g. OPENROUTER_API_KEY) from the environment.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess with "uv run python -m
#   tools.mcp_server" from the project root, so core/ is importable and
#   the project's virtualenv is used.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_packing_advisor_prompt
from core.config import Settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_agent(settings: Settings) -> Agent:
    """Create and configure the packing advisor agent.

    Args:
        settings: Runtime settings; only llm_model is used here.

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
        ),
    )

    return Agent(
        name="packing_advisor",
        model=LiteLlm(model=settings.llm_model),
        instruction=get_packing_advisor_prompt(),
        tools=[mcp_tools],
    )
