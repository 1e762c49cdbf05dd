import unittest

from letterboxed.data.trie import Trie
from letterboxed.engine.extractor import extract_words
from letterboxed.engine.puzzle import Puzzle

WORDS = [
    "adgj",
    "jbeh",
    "hkcfil",
    "dada",
    "ad",
    "a",
    "abc",  # a/b share a side
    "adz",  # z is not on the puzzle
    "all",  # doubled letter
    "heel",  # doubled letter
    "zadg",  # starts outside the puzzle
    "adgjx",  # playable prefix, foreign tail
]


class ExtractorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = Puzzle.parse("abc-def-ghi-jkl")
        self.trie = Trie(WORDS)

    def test_extracts_exactly_the_playable_words(self) -> None:
        words = {word.text for word in extract_words(self.trie, self.puzzle)}
        self.assertEqual(words, {"adgj", "jbeh", "hkcfil", "dada", "ad"})

    def test_min_length_filters_short_words(self) -> None:
        words = {word.text for word in extract_words(self.trie, self.puzzle, min_length=4)}
        self.assertEqual(words, {"adgj", "jbeh", "hkcfil", "dada"})

    def test_single_letter_words_are_never_emitted(self) -> None:
        words = {word.text for word in extract_words(self.trie, self.puzzle, min_length=1)}
        self.assertNotIn("a", words)

    def test_extracted_words_alternate_sides_and_use_puzzle_letters(self) -> None:
        for word in extract_words(self.trie, self.puzzle):
            for char in word.text:
                self.assertIn(char, self.puzzle.valid_letters)
            for a, b in zip(word.text, word.text[1:]):
                self.assertFalse(self.puzzle.same_side(a, b), word.text)

    def test_identical_consecutive_letters_are_forbidden(self) -> None:
        trie = Trie(["adda", "adad", "jj"])
        words = {word.text for word in extract_words(trie, self.puzzle)}
        self.assertEqual(words, {"adad"})

    def test_extracted_words_are_in_the_index(self) -> None:
        for word in extract_words(self.trie, self.puzzle):
            self.assertTrue(self.trie.search(word.text))

    def test_words_carry_signature(self) -> None:
        by_text = {word.text: word for word in extract_words(self.trie, self.puzzle)}
        hkcfil = by_text["hkcfil"]
        self.assertEqual(hkcfil.first, "h")
        self.assertEqual(hkcfil.last, "l")
        self.assertEqual(hkcfil.mask, self.puzzle.mask_of("hkcfil"))
        self.assertEqual(by_text["dada"].mask, self.puzzle.mask_of("ad"))

    def test_reinserting_words_does_not_change_output(self) -> None:
        first = extract_words(self.trie, self.puzzle)
        self.trie.update(WORDS)
        self.assertEqual(extract_words(self.trie, self.puzzle), first)

    def test_empty_trie_yields_nothing(self) -> None:
        self.assertEqual(extract_words(Trie(), self.puzzle), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
