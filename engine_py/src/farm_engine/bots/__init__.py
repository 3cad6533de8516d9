from .base import BaseBot, BotAction
from .greedy import GreedyBot
from .runner import play_bot_game

__all__ = ["BaseBot", "BotAction", "GreedyBot", "play_bot_game"]
