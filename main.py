"""Functions Framework entry point.

    functions-framework --target=rank_interactions
"""
from rank_bot.main import rank_interactions  # noqa: F401
