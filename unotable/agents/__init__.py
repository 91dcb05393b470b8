"""Built-in agents."""

from unotable.agents.human_agent import HumanAgent

__all__ = ["HumanAgent"]
