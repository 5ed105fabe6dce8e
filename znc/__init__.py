"""NSO app server package (api-lp1.znc.srv.nintendo.net)"""

from .login import get_login_token
from .game_token import Game, get_game_web_token

__all__ = [
    "Game",
    "get_login_token",
    "get_game_web_token",
]
