import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .dictionary import MIN_WORD_LEN

DEFAULT_WORD_LIST_PATH = Path(__file__).parent.parent / 'data' / 'words.txt'


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the lifetime of a session."""
    word_length: int = 5
    max_attempts: int = 8
    game_count: int = 2
    word_list_path: Path = DEFAULT_WORD_LIST_PATH

    def __post_init__(self):
        if self.word_length < MIN_WORD_LEN:
            raise ValueError(f"word_length must be at least {MIN_WORD_LEN}, got {self.word_length}")
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be greater than 0, got {self.max_attempts}")
        if self.game_count < 0:
            raise ValueError(f"game_count must not be negative, got {self.game_count}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> "GameConfig":
        """
        Reads settings from WORDLE_* environment variables, after loading a .env
        file if there is one. Unset variables keep their defaults.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ

        def _int(name: str, default: int) -> int:
            value = env.get(name)
            if value is None or value.strip() == "":
                return default
            try:
                return int(value)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got {value!r}") from None

        path = env.get("WORDLE_WORD_LIST")
        return cls(
            word_length=_int("WORDLE_WORD_LENGTH", cls.word_length),
            max_attempts=_int("WORDLE_MAX_ATTEMPTS", cls.max_attempts),
            game_count=_int("WORDLE_GAME_COUNT", cls.game_count),
            word_list_path=Path(path) if path else DEFAULT_WORD_LIST_PATH,
        )
