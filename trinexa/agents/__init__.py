from trinexa.agents.chat_agent import ChatAgent

__all__ = ["ChatAgent"]
