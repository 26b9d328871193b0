from typing import Iterable, Self

LETTER_A = ord("A")
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 16


class PyTrie:
    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * 26

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def child(self, letter: str):
        return self._children[ord(letter) - LETTER_A]

    def is_word(self):
        return self._is_word

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        if word == "":
            self.set_is_word()
            return self
        c = ord(word[0]) - LETTER_A
        assert 0 <= c < 26, word
        if not self.starts_word(c):
            self._children[c] = PyTrie()
        return self.descend(c).add_word(word[1:])

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)

    def find_word(self, word: str):
        if word == "":
            return self
        c = ord(word[0]) - LETTER_A
        if 0 <= c < 26 and self.starts_word(c):
            return self.descend(c).find_word(word[1:])
        return None

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """Words are normalized, so junk and out-of-range lengths are skipped."""
        trie = PyTrie()
        for word in words:
            word = normalize_word(word)
            if word is not None:
                trie.add_word(word)
        return trie


def is_grid_word(word: str):
    if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        return False
    for let in word:
        if let < "A" or let > "Z":
            return False
    return True


def normalize_word(word: str) -> str | None:
    word = word.strip().upper()
    if not is_grid_word(word):
        return None
    return word


def make_py_trie(dict_input: str):
    t = PyTrie()
    with open(dict_input, encoding="utf-8") as f:
        for line in f:
            word = normalize_word(line)
            if word is not None:
                t.add_word(word)
    return t
