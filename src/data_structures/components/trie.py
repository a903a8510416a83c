"""
Trie (prefix tree).

An N-ary tree storing one character per node, so that every path from
the root spells a prefix. Nodes flagged as terminating mark the end of
a stored word.

                  ┌───────┐
                  │   *   │
                  └─┬─┬─┬─┘
           ┌────────┘ │ └────────┐
       ┌───┴───┐  ┌───┴───┐  ┌───┴───┐
       │   2   │  │   4   │  │   5   │
       └───┬───┘  └───┬───┘  └───┬───┘
     ┌─────┘          │          └─────┐
 ┌───┴───┐        ┌───┴───┐        ┌───┴───┐
 │   0   │        │   0   │        │   0   │
 └───┬───┘        └─┬───┬─┘        └───┬───┘
     │          ┌───┘   └───┐          │
 ┌───┴───┐  ┌───┴───┐   ┌───┴───┐  ┌───┴───┐
 │   0   │  │   3   │   │   4   │  │   0   │
 └───────┘  └───────┘   └───────┘  └───────┘

         Trie of HTTP response codes

Time Complexity:
add_word/contains/remove_word: O(k), k being the length of the word
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

from sortedcontainers import SortedList

from ..core.errors import InvariantViolationError, NotFoundError

logger = logging.getLogger(__name__)

ROOT_MARKER = "*"


class TrieNode:
    """
    A trie node.
    Contains:
        character: the character this node represents
        children: a dict of character: TrieNode
        is_terminating: a flag marking the end of a stored word
    """

    __slots__ = ("character", "children", "is_terminating")

    def __init__(self, character: str) -> None:
        self.character = character
        self.children: Dict[str, TrieNode] = {}
        self.is_terminating = False

    def __repr__(self) -> str:
        flag = "$" if self.is_terminating else ""
        return f"TrieNode({self.character!r}{flag}, children={sorted(self.children)})"

    def has_children(self) -> bool:
        return bool(self.children)

    def get_child(self, character: str) -> Optional[TrieNode]:
        return self.children.get(character)

    def remove_child(self, character: str) -> TrieNode:
        """
        Removes and returns the child for character.
        Only a leaf which does not end a word may be removed.
        """
        child = self.get_child(character)
        if child is None:
            raise NotFoundError(f"Child {character!r} of {self.character!r} does not exist.")
        if child.has_children():
            raise InvariantViolationError(
                f"Child {character!r} cannot be removed because it is part of a longer sequence."
            )
        if child.is_terminating:
            raise InvariantViolationError(
                f"Child {character!r} cannot be removed because it terminates a word."
            )
        del self.children[character]
        return child

    def set_as_terminating(self) -> TrieNode:
        self.is_terminating = True
        return self

    def unset_as_terminating(self) -> TrieNode:
        self.is_terminating = False
        return self


class Trie:
    """
    Trie implements add_word, contains, remove_word and remove_all.
    Words that are not strings are converted with str() first.
    """

    def __init__(self, root_marker: str = ROOT_MARKER) -> None:
        self.root_marker = root_marker
        self.root = TrieNode(root_marker)

    def __repr__(self) -> str:
        return f"Trie({self.words()!r})"

    def __contains__(self, word: Any) -> bool:
        return self.contains(word, exact_match=True)

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_words(self.root, ""))

    def _find(self, word: str) -> Optional[TrieNode]:
        """Returns the node reached by following word from the root, or None."""
        current = self.root
        for character in word:
            child = current.get_child(character)
            if child is None:
                return None
            current = child
        return current

    def add_word(self, word: Any) -> Trie:
        """Adds word, creating any missing nodes along its path."""
        word = str(word)
        current = self.root
        for character in word:
            child = current.get_child(character)
            if child is None:
                child = TrieNode(character)
                current.children[character] = child
            current = child

        current.set_as_terminating()
        return self

    def contains(self, word: Any, exact_match: bool = False) -> bool:
        """
        Returns True if word is a prefix of a stored word, or with
        exact_match, only if word itself was stored.
        """
        node = self._find(str(word))
        if node is None:
            return False
        if exact_match:
            return node.is_terminating
        return True

    def remove_word(self, word: Any) -> Trie:
        """
        Removes word from the trie and prunes the nodes that no longer
        lead to any stored word. Prefixes shared with other words survive.
        Raises NotFoundError if word was never added in full.
        """
        word = str(word)
        if not word:
            if not self.root.is_terminating:
                raise NotFoundError("The empty word cannot be removed because it does not exist.")
            self.root.unset_as_terminating()
            return self

        self._remove_word(word, 0, self.root)
        logger.debug(f"Removed word {word!r} from trie")
        return self

    def _remove_word(self, word: str, i: int, node: TrieNode) -> None:
        character = word[i]
        child = node.get_child(character)
        if child is None:
            raise NotFoundError(f"The word {word!r} cannot be removed because it does not exist.")

        if i == len(word) - 1:
            if not child.is_terminating:
                raise NotFoundError(
                    f"The word {word!r} cannot be removed because it has not matched exactly."
                )
            child.unset_as_terminating()
        else:
            self._remove_word(word, i + 1, child)

        # Unwinding: drop the node only if nothing else depends on it
        if not child.has_children() and not child.is_terminating:
            node.remove_child(character)

    def remove_all(self) -> Trie:
        self.root = TrieNode(self.root_marker)
        return self

    def _iter_words(self, node: TrieNode, prefix: str) -> Iterator[str]:
        if node.is_terminating:
            yield prefix
        for character, child in node.children.items():
            yield from self._iter_words(child, prefix + character)

    def words(self, prefix: Any = "") -> List[str]:
        """Returns every stored word starting with prefix, in lexicographic order."""
        prefix = str(prefix)
        node = self._find(prefix)
        if node is None:
            return []

        found: SortedList = SortedList(self._iter_words(node, prefix))
        return list(found)
