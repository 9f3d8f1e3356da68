from .dictionary import Dictionary, DictionaryEmpty
from .feedback import LetterFeedback, compute_feedback, summarize_letters
from .game import GameStatus, GuessEngine, GuessError, GuessResult
from .session import Session
from .config import GameConfig

__all__ = [
    "Dictionary", "DictionaryEmpty",
    "LetterFeedback", "compute_feedback", "summarize_letters",
    "GameStatus", "GuessEngine", "GuessError", "GuessResult",
    "Session", "GameConfig",
]
