import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

import main as cli
from letterboxed.core.exceptions import DictionarySourceUnavailable, MalformedPuzzle
from letterboxed.core.models import Solution
from letterboxed.data.dictionary import WordDictionary
from letterboxed.engine.letterboxed import LetterBoxed, LetterBoxedConfig, solve_puzzle
from letterboxed.io.hint import WordHint

WORDS = ["adgjbehk", "kcfil", "adgj", "jbeh", "hkcfil", "abc", "ad"]


class LetterBoxedTests(unittest.TestCase):
    def test_from_words_runs_full_pipeline(self) -> None:
        letter_boxed = LetterBoxed.from_words("ABC-DEF-GHI-JKL", WORDS)
        self.assertEqual(str(letter_boxed.puzzle), "abc-def-ghi-jkl")
        self.assertEqual(
            sorted(word.text for word in letter_boxed.words),
            ["adgj", "adgjbehk", "hkcfil", "jbeh", "kcfil"],
        )
        result = letter_boxed.solve()
        self.assertEqual(result.word_count, 5)
        self.assertEqual(
            result.solutions,
            [Solution(("adgjbehk", "kcfil")), Solution(("adgj", "jbeh", "hkcfil"))],
        )
        self.assertEqual(result.shortest(), [Solution(("adgjbehk", "kcfil"))])

    def test_solve_puzzle_accepts_dictionary(self) -> None:
        result = solve_puzzle("abc-def-ghi-jkl", WordDictionary.from_words(WORDS), max_chain_length=2)
        self.assertEqual(result.solutions, [Solution(("adgjbehk", "kcfil"))])

    def test_malformed_puzzle_fails_before_loading(self) -> None:
        with self.assertRaises(MalformedPuzzle):
            LetterBoxed(LetterBoxedConfig(puzzle="ab-cde-fgh-ijk", dictionary_path="missing.txt"))

    def test_missing_dictionary_propagates(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(DictionarySourceUnavailable):
                solve_puzzle("abc-def-ghi-jkl", Path(tmpdir) / "missing.txt")

    def test_empty_dictionary_has_no_solutions(self) -> None:
        result = LetterBoxed.from_words("abc-def-ghi-jkl", []).solve()
        self.assertEqual(result.solutions, [])
        self.assertEqual(result.word_count, 0)

    def test_solve_puzzle_with_empty_dictionary_has_no_solutions(self) -> None:
        result = solve_puzzle("abc-def-ghi-jkl", WordDictionary.from_words([]))
        self.assertEqual(result.solutions, [])
        self.assertFalse(result.timed_out)

    def test_supplied_empty_dictionary_is_not_replaced(self) -> None:
        config = LetterBoxedConfig(puzzle="abc-def-ghi-jkl", dictionary_path="missing.txt")
        dictionary = WordDictionary()
        letter_boxed = LetterBoxed(config, dictionary=dictionary)
        self.assertIs(letter_boxed.dictionary, dictionary)
        self.assertEqual(letter_boxed.solve().solutions, [])


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.words_path = Path(self._tmpdir.name) / "words.txt"
        self.words_path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")

    def run_cli(self, *extra: str) -> str:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            cli.main([
                "--puzzle", "abc-def-ghi-jkl",
                "--dict", str(self.words_path),
                "--log-level", "ERROR",
                *extra,
            ])
        return buffer.getvalue()

    def test_prints_solutions(self) -> None:
        output = self.run_cli()
        lines = output.splitlines()
        self.assertEqual(lines[0], "solving puzzle abc-def-ghi-jkl")
        self.assertEqual(lines[1], "5 valid words found")
        self.assertEqual(lines[2:], ["adgjbehk - kcfil", "adgj - jbeh - hkcfil"])

    def test_limit_and_length(self) -> None:
        output = self.run_cli("--len", "2", "--limit", "1")
        self.assertEqual(output.splitlines()[2:], ["adgjbehk - kcfil"])

    def test_json_output(self) -> None:
        target = Path(self._tmpdir.name) / "out.json"
        self.run_cli("--output", str(target))
        payload = json.loads(target.read_text(encoding="utf-8"))
        self.assertEqual(payload["puzzle"], "abc-def-ghi-jkl")
        self.assertEqual(payload["solutions"][0], ["adgjbehk", "kcfil"])
        self.assertFalse(payload["timed_out"])

    def test_hint_uses_first_word_of_first_solution(self) -> None:
        with patch.object(cli, "HintClient") as client_cls:
            client_cls.return_value.lookup.return_value = WordHint(
                word="adgjbehk", meanings=["(noun) a test word"]
            )
            output = self.run_cli("--hint")
        client_cls.return_value.lookup.assert_called_once_with("adgjbehk")
        self.assertIn("Word: adgjbehk", output)
        self.assertIn("  - (noun) a test word", output)

    def test_malformed_puzzle_exits(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer), patch("sys.stderr", new=io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--puzzle", "ab-cde-fgh-ijk", "--dict", str(self.words_path)])
        self.assertEqual(ctx.exception.code, 2)

    def test_unknown_log_level_exits(self) -> None:
        with redirect_stdout(io.StringIO()), patch("sys.stderr", new=io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli("--log-level", "chatty")
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
