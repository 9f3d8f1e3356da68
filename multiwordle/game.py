import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .dictionary import Dictionary
from .feedback import LetterFeedback, compute_feedback

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GuessError(Enum):
    GAME_ALREADY_OVER = "Game is over."
    LENGTH_MISMATCH = "Guess has the wrong number of letters."
    UNKNOWN_WORD = "Guess is not in word list."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class GuessResult:
    """Outcome of a single guess: either letter feedback or the reason it was rejected."""
    status: GameStatus
    feedback: Optional[Tuple[LetterFeedback, ...]] = None
    error: Optional[GuessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GuessEngine:
    """
    A single word-guessing game.

    The engine owns its secret word and attempt counter; both only change
    through `guess`. Letter feedback is handed back to the caller and not
    kept here, so any board history lives with whoever draws the board.
    """

    def __init__(self, dictionary: Dictionary, max_attempts: int, secret_word: Optional[str] = None, rng=None):
        """
        Args:
            dictionary (Dictionary): Shared word list, used for validation and secret selection.
            max_attempts (int): Number of valid guesses allowed.
            secret_word (str): A specific secret to use instead of a random pick.
            rng: Random source with a `choice` method, used when no secret is given.
        """
        if max_attempts <= 0:
            raise ValueError("max_attempts must be greater than 0.")

        if secret_word is None:
            if rng is None:
                raise ValueError("Either secret_word or rng must be given.")
            secret_word = dictionary.pick_random(rng)

        secret_word = secret_word.lower()
        if len(secret_word) != dictionary.word_length:
            raise ValueError(f"Secret word must be {dictionary.word_length} letters long.")
        if secret_word not in dictionary:
            raise ValueError("Secret word must be in the dictionary.")

        self.dictionary = dictionary
        self.max_attempts = max_attempts
        self._secret_word = secret_word

        self.attempt_count = 0
        self.status = GameStatus.IN_PROGRESS

    @property
    def word_length(self) -> int:
        return len(self._secret_word)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def solved(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempt_count

    @property
    def revealed_word(self) -> Optional[str]:
        # the secret stays hidden until the game has ended
        return self._secret_word if self.is_over else None

    def guess(self, raw_input: str) -> GuessResult:
        """
        Processes a guess. If the guess is rejected (game over, wrong length or
        not in the word list) the returned result carries the error and no
        attempt is consumed. Otherwise the attempt is counted and the result
        carries the letter-level feedback.
        """
        if self.is_over:
            return self._reject(GuessError.GAME_ALREADY_OVER, raw_input)

        guess_word = raw_input.lower()

        if len(guess_word) != self.word_length:
            return self._reject(GuessError.LENGTH_MISMATCH, raw_input)
        if guess_word not in self.dictionary:
            return self._reject(GuessError.UNKNOWN_WORD, raw_input)

        self.attempt_count += 1
        feedback = tuple(compute_feedback(self._secret_word, guess_word))

        if guess_word == self._secret_word:
            self.status = GameStatus.WON
            logger.info("Solved in %d/%d attempts", self.attempt_count, self.max_attempts)
        elif self.attempt_count == self.max_attempts:
            self.status = GameStatus.LOST
            logger.info("Not solved. The answer was: %s", self._secret_word)

        return GuessResult(status=self.status, feedback=feedback)

    def _reject(self, error: GuessError, raw_input: str) -> GuessResult:
        logger.debug("Rejected guess %r: %s", raw_input, error.message)
        return GuessResult(status=self.status, error=error)

    def __repr__(self) -> str:
        return f"GuessEngine(status={self.status.value}, attempts={self.attempt_count}/{self.max_attempts})"
