from collections import Counter
from enum import IntEnum
from typing import Dict, List, Sequence

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class LetterFeedback(IntEnum):
    ABSENT = 0
    MISPLACED = 1
    CORRECT = 2


def compute_feedback(secret: str, guess: str) -> List[LetterFeedback]:
    """
    Returns the letter-level feedback for a guess against the secret word.

    A letter is only marked misplaced while the secret still has unclaimed
    copies of it, so a guess never gets more credit for a letter than the
    secret has copies.
    """
    if len(secret) != len(guess):
        raise ValueError("Guess and secret must have the same length.")

    # default all letters to absent
    states = [LetterFeedback.ABSENT] * len(secret)

    # make a mapping from letters in the secret word to their count
    letter_count = Counter(secret)

    # exact matches first, they claim their letter before anything else can
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            states[i] = LetterFeedback.CORRECT
            letter_count[g] -= 1

    for i, g in enumerate(guess):
        if states[i] == LetterFeedback.CORRECT:
            continue
        if letter_count[g] > 0:
            states[i] = LetterFeedback.MISPLACED
            letter_count[g] -= 1

    return states


def summarize_letters(guesses: Sequence[str], feedbacks: Sequence[Sequence[LetterFeedback]]) -> Dict[str, str]:
    """
    Returns a mapping from letters to their keyboard state (correct, present, absent, unused)
    across a history of guesses and their feedback.
    """
    # three levels of promotion: absent -> present -> correct
    correct, present, absent = set(), set(), set()

    for guess, feedback in zip(guesses, feedbacks):
        for letter, state in zip(guess.lower(), feedback):
            if state == LetterFeedback.CORRECT:
                correct.add(letter)
                present.discard(letter)
            elif state == LetterFeedback.MISPLACED and letter not in correct:
                present.add(letter)
            elif letter not in correct and letter not in present:
                absent.add(letter)

    # a letter first seen as absent can be promoted by a later guess
    absent -= correct | present

    return {
        letter: (
            "correct" if letter in correct else
            "present" if letter in present else
            "absent" if letter in absent else
            "unused"
        ) for letter in ALPHABET
    }
