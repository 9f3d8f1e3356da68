import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from multiwordle import GameConfig
from multiwordle.config import DEFAULT_WORD_LIST_PATH


class TestGameConfig(unittest.TestCase):
    def test_defaults(self):
        config = GameConfig()
        self.assertEqual((config.word_length, config.max_attempts, config.game_count), (5, 8, 2))
        self.assertEqual(config.word_list_path, DEFAULT_WORD_LIST_PATH)

    def test_bounds(self):
        with self.assertRaises(ValueError):
            GameConfig(word_length=2)
        with self.assertRaises(ValueError):
            GameConfig(max_attempts=0)
        with self.assertRaises(ValueError):
            GameConfig(game_count=-1)
        # zero games is allowed
        self.assertEqual(GameConfig(game_count=0).game_count, 0)

    def test_from_env_mapping(self):
        config = GameConfig.from_env({
            "WORDLE_WORD_LENGTH": "6",
            "WORDLE_MAX_ATTEMPTS": "4",
            "WORDLE_GAME_COUNT": "3",
            "WORDLE_WORD_LIST": "/tmp/words.txt",
        }, dotenv=False)
        self.assertEqual(config.word_length, 6)
        self.assertEqual(config.max_attempts, 4)
        self.assertEqual(config.game_count, 3)
        self.assertEqual(config.word_list_path, Path("/tmp/words.txt"))

    def test_from_env_missing_values_use_defaults(self):
        config = GameConfig.from_env({"WORDLE_GAME_COUNT": ""}, dotenv=False)
        self.assertEqual(config, GameConfig())

    def test_from_env_rejects_non_integers(self):
        with self.assertRaises(ValueError):
            GameConfig.from_env({"WORDLE_MAX_ATTEMPTS": "lots"}, dotenv=False)

    def test_from_env_reads_dotenv_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, ".env").write_text("WORDLE_GAME_COUNT=1\n")
            cwd = os.getcwd()
            os.chdir(tmp)
            try:
                with patch.dict(os.environ, {}, clear=True):
                    config = GameConfig.from_env()
            finally:
                os.chdir(cwd)
        self.assertEqual(config.game_count, 1)


if __name__ == '__main__':
    unittest.main()
