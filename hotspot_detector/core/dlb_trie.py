# dlb_trie.py
# de la Briandais (DLB) trie for n-gram hotspot indexing.
# Each node holds one character, a link to its first child (next character
# in the path) and a link to its next sibling (another character at the same depth).
# Terminal nodes carry corpus statistics for the n-gram that ends there.

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple


class DLBNode:
    """
    A single node in the DLB trie.
    ch: the character held by this node
    child: first node of the next level along this path
    sibling: next alternative character at the same level
    is_terminal: the path ending here is an indexed n-gram
    freq/doc_freq/begin_count/middle_count/end_count: only meaningful when terminal
    """

    __slots__ = (
        "ch",
        "child",
        "sibling",
        "is_terminal",
        "freq",
        "doc_freq",
        "begin_count",
        "middle_count",
        "end_count",
    )

    def __init__(self, ch: str) -> None:
        self.ch = ch
        self.child: Optional[DLBNode] = None
        self.sibling: Optional[DLBNode] = None
        self.is_terminal = False
        self.freq = 0
        self.doc_freq = 0
        self.begin_count = 0
        self.middle_count = 0
        self.end_count = 0


class DLBTrie:
    """
    Child/sibling linked trie used by the hotspot detector for:
     - inserting n-grams and folding occurrence statistics into them
     - walking every indexed n-gram that starts at a given offset of a text
    """

    def __init__(self) -> None:
        # absent until the first character is indexed
        self.root: Optional[DLBNode] = None
        self._size = 0

    # insertion -----------------------------------------------------
    def insert_and_update(
        self,
        ngram: str,
        at_begin: bool,
        in_middle: bool,
        at_end: bool,
        first_in_password: bool,
    ) -> DLBNode:
        """
        Walk (and extend where needed) the path for `ngram`, then update
        the statistics of its terminal node. Returns that node.
        """
        if not ngram:
            raise ValueError("cannot index an empty n-gram")

        if self.root is None:
            self.root = DLBNode(ngram[0])

        # `level` is the first node of the sibling chain we are scanning
        level = self.root
        node = level
        last = len(ngram) - 1
        for depth, ch in enumerate(ngram):
            node = self._find_or_append(level, ch)
            if depth < last:
                if node.child is None:
                    node.child = DLBNode(ngram[depth + 1])
                level = node.child

        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1
        node.freq += 1
        if first_in_password:
            node.doc_freq += 1
        if at_begin:
            node.begin_count += 1
        if in_middle:
            node.middle_count += 1
        if at_end:
            node.end_count += 1
        return node

    @staticmethod
    def _find_or_append(head: DLBNode, ch: str) -> DLBNode:
        """Scan a sibling chain for `ch`, appending a new node at its end if missing."""
        node = head
        while node.ch != ch:
            if node.sibling is None:
                node.sibling = DLBNode(ch)
            node = node.sibling
        return node

    @staticmethod
    def _find(head: Optional[DLBNode], ch: str) -> Optional[DLBNode]:
        node = head
        while node is not None and node.ch != ch:
            node = node.sibling
        return node

    # search/traversal ---------------------------------------------------------
    def matches_from(self, text: str, start: int) -> Iterator[Tuple[int, DLBNode]]:
        """
        Yield (length, terminal_node) for every indexed n-gram that begins at
        text[start]. Shorter matches come first; the walk keeps descending
        past terminal nodes so longer n-grams sharing the prefix are found too.
        Stops at the first character with no matching sibling.
        """
        level = self.root
        for j in range(start, len(text)):
            node = self._find(level, text[j])
            if node is None:
                return
            if node.is_terminal:
                yield j - start + 1, node
            level = node.child

    def get(self, ngram: str) -> Optional[DLBNode]:
        """Terminal node for `ngram`, or None when it was never indexed."""
        if not ngram:
            return None
        level = self.root
        node = None
        for ch in ngram:
            node = self._find(level, ch)
            if node is None:
                return None
            level = node.child
        return node if node is not None and node.is_terminal else None

    def __contains__(self, ngram: str) -> bool:
        return self.get(ngram) is not None

    # convenience/debugging -----------------------------------------------------
    def size(self) -> int:
        """Number of distinct indexed n-grams (terminal nodes)."""
        return self._size

    def ngrams(self) -> Iterator[Tuple[str, DLBNode]]:
        """
        Iterate (ngram, terminal_node) pairs depth first.
        Uses an explicit stack, n-grams can be long enough to hurt recursion.
        """
        if self.root is None:
            return
        stack: List[Tuple[DLBNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            # sibling shares the prefix, child extends it
            if node.sibling is not None:
                stack.append((node.sibling, prefix))
            path = prefix + node.ch
            if node.child is not None:
                stack.append((node.child, path))
            if node.is_terminal:
                yield path, node
