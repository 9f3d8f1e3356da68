import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import main
from multiwordle import DictionaryEmpty, LetterFeedback, Session

from helpers import ScriptedRng, make_dictionary


class TestDriver(unittest.TestCase):
    def test_load_dictionary_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp, "words.txt")
            path.write_text("crane\nslate\ncat\n")
            dictionary = main.load_dictionary(path, 5)
        self.assertEqual(list(dictionary), ["crane", "slate"])

    def test_load_dictionary_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            main.load_dictionary(Path("/nonexistent/words.txt"), 5)

    def test_load_dictionary_without_matching_words(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp, "words.txt")
            path.write_text("cat\ndog\n")
            with self.assertRaises(DictionaryEmpty):
                main.load_dictionary(path, 5)

    def test_bundled_word_list_loads(self):
        dictionary = main.load_dictionary(main.GameConfig().word_list_path, 5)
        self.assertIn("crane", dictionary)

    def test_format_feedback_symbols(self):
        feedback = [LetterFeedback.CORRECT, LetterFeedback.MISPLACED, LetterFeedback.ABSENT]
        self.assertTrue(main.format_feedback("abc", feedback).endswith("|GYX|"))

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch('builtins.input', side_effect=["", "zzzzz", "crane", "slate"])
    def test_play_until_session_over(self, mock_input, mock_stdout):
        session = Session.new(make_dictionary(), 2, 6, rng=ScriptedRng(["crane", "slate"]))
        main.play(session)

        self.assertTrue(session.is_session_over())
        self.assertEqual(session.won_count, 2)
        output = mock_stdout.getvalue()
        self.assertIn("Invalid Guess", output)
        self.assertIn("Solved 2/2", output)

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch('builtins.input', side_effect=EOFError)
    def test_play_stops_on_eof(self, mock_input, mock_stdout):
        session = Session.new(make_dictionary(), 1, 6, rng=ScriptedRng(["crane"]))
        main.play(session)
        self.assertFalse(session.is_session_over())
        self.assertIn("Exiting game.", mock_stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
