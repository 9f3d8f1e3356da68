import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional

from multiwordle import Dictionary, GameConfig, LetterFeedback, Session, summarize_letters

FEEDBACK_CHARS = {LetterFeedback.CORRECT: "G", LetterFeedback.MISPLACED: "Y", LetterFeedback.ABSENT: "X"}
FEEDBACK_COLORS = {LetterFeedback.CORRECT: "green", LetterFeedback.MISPLACED: "yellow", LetterFeedback.ABSENT: "white"}


def colored(st, color:Optional[str], background=False): return f"\u001b[{10*background+60*(color.upper() == color)+30+['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'].index(color.lower())}m{st}\u001b[0m" if color is not None else st


def load_dictionary(path: Path, word_length: int) -> Dictionary:
    if not path.is_file():
        raise FileNotFoundError(f"Error: Word list not found at '{path}'")
    with open(path, 'r', encoding='utf-8') as f:
        return Dictionary.load(f.read(), word_length)


def format_feedback(guess: str, feedback: List[LetterFeedback]) -> str:
    letters = "".join(colored(letter.upper(), FEEDBACK_COLORS[state]) for letter, state in zip(guess, feedback))
    chars = "".join(FEEDBACK_CHARS[state] for state in feedback)
    return f"|{letters}| |{chars}|"


def print_welcome(config: GameConfig):
    print(colored("=" * 50, "blue"))
    print(colored("Wordle!", "cyan"))
    print(f"Guess {config.game_count} secret {config.word_length}-letter word(s) at once in {config.max_attempts} tries.")
    print(f"Feedback: [{FEEDBACK_CHARS[LetterFeedback.CORRECT]}] Correct, "
          f"[{FEEDBACK_CHARS[LetterFeedback.MISPLACED]}] Misplaced, "
          f"[{FEEDBACK_CHARS[LetterFeedback.ABSENT]}] Absent.")
    print(colored("=" * 50, "blue"))


def print_game_over(session: Session):
    print("\n" + "=" * 50)
    for i, engine in enumerate(session.engines):
        if engine.solved:
            print(colored(f"Game {i + 1}: guessed '{engine.revealed_word.upper()}' in {engine.attempt_count} tries.", "green"))
        else:
            print(colored(f"Game {i + 1}: not solved. The secret word was '{engine.revealed_word.upper()}'.", "red"))
    print(f"Solved {session.won_count}/{len(session)}")
    print("=" * 50)


def play(session: Session):
    """Reads guesses from stdin until every game in the session is over."""
    # the board history lives here, the engines don't keep it
    history: Dict[int, List[tuple]] = {i: [] for i in range(len(session))}

    while not session.is_session_over():
        active = session.active_indices()
        attempts_left = max(session.engines[i].attempts_left for i in active)
        try:
            action = input(f"({attempts_left} left) Enter your guess: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting game.")
            return
        if not action:
            continue

        results = session.submit_guess(action)
        for i, result in results.items():
            if not result.ok:
                print(colored(f"Game {i + 1}: Invalid Guess: {result.error.message}", "red"))
                continue
            history[i].append((action.lower(), result.feedback))
            print(f"Game {i + 1}: {format_feedback(action.lower(), result.feedback)}")

        # keyboard summary for the first game still running
        remaining = session.active_indices()
        if remaining:
            guesses = [g for g, _ in history[remaining[0]]]
            feedbacks = [f for _, f in history[remaining[0]]]
            states = summarize_letters(guesses, feedbacks)
            unused = " ".join(sorted(k.upper() for k, v in states.items() if v == "unused"))
            print(f"  Unused: {unused}")

    print_game_over(session)


def main():
    """Main function to run an interactive multi-Wordle game from the command line."""
    parser = argparse.ArgumentParser(
        description="Play several Wordle games at once from the command line.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--word-list', type=Path, default=None, help="Path to a newline-delimited word list.")
    parser.add_argument('--word-length', type=int, default=None, help="Length of the secret words.")
    parser.add_argument('--max-attempts', type=int, default=None, help="Valid guesses allowed per game.")
    parser.add_argument('--games', type=int, default=None, help="Number of games played at once.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for picking secret words.")
    parser.add_argument('--verbose', action='store_true', help="Log game events to stderr.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        env_config = GameConfig.from_env()
        config = GameConfig(
            word_length=args.word_length if args.word_length is not None else env_config.word_length,
            max_attempts=args.max_attempts if args.max_attempts is not None else env_config.max_attempts,
            game_count=args.games if args.games is not None else env_config.game_count,
            word_list_path=args.word_list or env_config.word_list_path,
        )
        dictionary = load_dictionary(config.word_list_path, config.word_length)
    except (FileNotFoundError, ValueError) as e:
        print(e)
        sys.exit(1)

    session = Session.new(dictionary, config.game_count, config.max_attempts, rng=random.Random(args.seed))
    print_welcome(config)
    play(session)


if __name__ == "__main__":
    main()
