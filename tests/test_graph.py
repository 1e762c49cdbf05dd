import unittest

from letterboxed.core.models import PlayableWord
from letterboxed.data.trie import Trie
from letterboxed.engine.extractor import extract_words
from letterboxed.engine.graph import PuzzleGraph
from letterboxed.engine.puzzle import Puzzle


class PuzzleGraphTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = Puzzle.parse("abc-def-ghi-jkl")
        trie = Trie(["adgjbehk", "ajdgbehk", "kcfil", "adgj", "dada"])
        self.graph = PuzzleGraph.build(extract_words(trie, self.puzzle), self.puzzle)

    def test_words_sharing_a_signature_are_grouped(self) -> None:
        mask = self.puzzle.mask_of("adgjbehk")
        self.assertEqual(
            sorted(self.graph.words_for("a", "k", mask)),
            ["adgjbehk", "ajdgbehk"],
        )
        self.assertEqual(self.graph.signature_count, 4)
        self.assertEqual(self.graph.word_count, 5)
        self.assertEqual(len(self.graph), 5)

    def test_edges_from_unknown_letter_are_empty(self) -> None:
        self.assertEqual(dict(self.graph.edges_from("l")), {})
        self.assertEqual(self.graph.words_for("l", "a", 1), ())

    def test_signatures_follow_puzzle_order(self) -> None:
        firsts = [first for first, _, _, _ in self.graph.signatures()]
        self.assertEqual(firsts, sorted(firsts, key=self.puzzle.letters.index))
        self.assertEqual(set(firsts), {"a", "d", "k"})

    def test_contains(self) -> None:
        self.assertIn("kcfil", self.graph)
        self.assertNotIn("kcfi", self.graph)
        self.assertNotIn("zzz", self.graph)

    def test_graph_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.graph.edges_from("a")["z"] = {}  # type: ignore[index]

    def test_duplicate_words_are_added_once(self) -> None:
        word = PlayableWord("kcfil", self.puzzle.mask_of("kcfil"))
        graph = PuzzleGraph.build([word, word], self.puzzle)
        self.assertEqual(graph.words_for("k", "l", word.mask), ("kcfil",))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
