"""Registry for Discord command handlers."""
from typing import Callable, Dict, Optional


class CommandHandler:
    """Handler for Discord slash commands.

    A handler receives the full interaction and returns a response dict, or
    None when the invocation does not carry what it needs.
    """

    HANDLERS: Dict[str, Callable[[dict], Optional[dict]]] = {}

    @classmethod
    def register(cls, command_name: str):
        """Decorator to register a command handler."""
        def decorator(func):
            cls.HANDLERS[command_name] = func
            return func
        return decorator

    @classmethod
    def handle(cls, command_name: str, interaction: dict) -> Optional[dict]:
        """Handle a command by name, None if no handler answers."""
        handler = cls.HANDLERS.get(command_name)
        if handler is None:
            return None
        return handler(interaction)
