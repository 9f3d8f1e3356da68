import logging
import random
import uuid
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from .dictionary import Dictionary
from .game import GuessEngine, GuessResult

logger = logging.getLogger(__name__)


class Session:
    """Several independent games played with the same guesses."""

    def __init__(self, dictionary: Dictionary, engines: List[GuessEngine], rng=None):
        self.dictionary = dictionary
        self.engines = engines
        self.rng = rng or random.Random()
        self.session_id = str(uuid.uuid4())

    @classmethod
    def new(cls, dictionary: Dictionary, game_count: int, max_attempts: int, rng=None) -> "Session":
        """
        Starts a session of `game_count` games, each with its own random secret word.

        Args:
            dictionary (Dictionary): Word list shared by every game.
            game_count (int): Number of games to play at once. Zero is allowed.
            max_attempts (int): Valid guesses allowed per game.
            rng: Random source with a `choice` method. Defaults to a fresh `random.Random()`.
        """
        if game_count < 0:
            raise ValueError("game_count must not be negative.")
        if max_attempts <= 0:
            raise ValueError("max_attempts must be greater than 0.")

        rng = rng or random.Random()
        # secrets may repeat across games, nothing forces them to be unique
        engines = [GuessEngine(dictionary, max_attempts, rng=rng) for _ in range(game_count)]
        session = cls(dictionary, engines, rng=rng)
        logger.info("Session %s started with %d game(s), %d attempts each", session.session_id, game_count, max_attempts)
        return session

    def reset(self) -> None:
        """Throws away the current games and draws new secrets, each game keeping its attempt limit."""
        self.engines = [GuessEngine(self.dictionary, engine.max_attempts, rng=self.rng) for engine in self.engines]
        self.session_id = str(uuid.uuid4())
        logger.info("Session reset as %s", self.session_id)

    def active_indices(self) -> List[int]:
        return [i for i, engine in enumerate(self.engines) if not engine.is_over]

    def submit_guess(self, raw_input: str, parallel: bool = False, max_workers: Optional[int] = None) -> Dict[int, GuessResult]:
        """
        Sends the same guess to every game still in progress.

        Games that are already won or lost are skipped and don't appear in the
        returned mapping. A rejected guess only shows up as an error for the
        games that rejected it; it never fails the whole call.

        Returns:
            Dict[int, GuessResult]: game index -> result for that game.
        """
        active = self.active_indices()
        if not parallel or len(active) < 2:
            return {i: self.engines[i].guess(raw_input) for i in active}

        # every engine only touches its own state, so the only sync point is
        # waiting for all of them before building the mapping
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = {i: pool.submit(self.engines[i].guess, raw_input) for i in active}
            return {i: future.result() for i, future in futures.items()}

    def is_session_over(self) -> bool:
        return all(engine.is_over for engine in self.engines)

    @property
    def won_count(self) -> int:
        return sum(engine.solved for engine in self.engines)

    def __len__(self) -> int:
        return len(self.engines)
