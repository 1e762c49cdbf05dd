import unittest

from letterboxed.data.trie import Trie


class TrieTests(unittest.TestCase):
    def test_search_matches_only_complete_words(self) -> None:
        trie = Trie(["fig", "figure"])
        self.assertTrue(trie.search("fig"))
        self.assertTrue(trie.search("figure"))
        self.assertFalse(trie.search("fi"))
        self.assertFalse(trie.search("figures"))
        self.assertFalse(trie.search("gif"))

    def test_insert_is_idempotent(self) -> None:
        trie = Trie()
        trie.insert("limp")
        snapshot = list(trie)
        trie.insert("limp")
        self.assertEqual(len(trie), 1)
        self.assertEqual(list(trie), snapshot)
        self.assertIn("limp", trie)

    def test_empty_string_is_ignored(self) -> None:
        trie = Trie([""])
        self.assertEqual(len(trie), 0)
        self.assertFalse(trie.search(""))

    def test_find_exposes_nodes_for_traversal(self) -> None:
        trie = Trie(["gnarl", "gnat"])
        node = trie.find("gna")
        assert node is not None
        self.assertFalse(node.is_word)
        self.assertEqual(sorted(node.children), ["r", "t"])
        self.assertIsNone(trie.find("gx"))
        self.assertIs(trie.child("g"), trie.root.children["g"])

    def test_iteration_is_lexicographic(self) -> None:
        trie = Trie(["b", "abc", "a", "ab"])
        self.assertEqual(list(trie), ["a", "ab", "abc", "b"])

    def test_contains_rejects_non_strings(self) -> None:
        trie = Trie(["fig"])
        self.assertNotIn(42, trie)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
