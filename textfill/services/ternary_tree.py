import logging

from textfill.services.normalizer import InvalidTermError, normalize

logger = logging.getLogger("textfill.tree")


class TTNode:
    """One character position in a ternary search tree.

    `less` and `greater` hold siblings at the same position in the term;
    `equal` holds the node for the next character.
    """

    __slots__ = (
        "letter",
        "is_terminal",
        "priority",
        "terminal_priority",
        "less",
        "equal",
        "greater",
    )

    def __init__(self, letter: str, priority: int = 0):
        self.letter: str = letter
        self.is_terminal: bool = False
        self.priority: int = priority
        self.terminal_priority: int = 0
        self.less: TTNode | None = None
        self.equal: TTNode | None = None
        self.greater: TTNode | None = None


class TernaryTreeTextFiller:
    """Ternary-search-tree autocompleter.

    Stores normalized (trimmed, case-folded) terms and answers membership,
    first-completion and priority-completion queries. Terms can only be
    added, never removed.
    """

    def __init__(self):
        self._root: TTNode | None = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, query: object) -> bool:
        try:
            return self.contains(query)  # type: ignore[arg-type]
        except InvalidTermError:
            return False

    # insertion -------------------------------------------------------------

    def add(self, term: str, priority: int | None = None) -> bool:
        """Add a term, optionally tagged with a priority.

        Returns True if the term was new, False if it was already stored
        (in which case nothing changes, including its priority).
        """
        term = normalize(term)
        added = self._insert(term, priority)
        if added:
            self._size += 1
            logger.debug("Added term=%r priority=%s size=%d", term, priority, self._size)
        return added

    def _insert(self, term: str, priority: int | None) -> bool:
        if self._root is None:
            self._root = self._new_chain(term, priority)
            return True

        node = self._root
        i = 0
        while True:
            ch = term[i]
            if ch < node.letter:
                if node.less is None:
                    node.less = self._new_chain(term[i:], priority)
                    return True
                node = node.less
            elif ch > node.letter:
                if node.greater is None:
                    node.greater = self._new_chain(term[i:], priority)
                    return True
                node = node.greater
            elif i == len(term) - 1:
                if node.is_terminal:
                    return False
                # Existing node: its own priority is left untouched.
                node.is_terminal = True
                if priority is not None:
                    node.terminal_priority = priority
                return True
            else:
                i += 1
                if node.equal is None:
                    node.equal = self._new_chain(term[i:], priority)
                    return True
                node = node.equal

    @staticmethod
    def _new_chain(suffix: str, priority: int | None) -> TTNode:
        """Build an equal-linked chain spelling `suffix`; the last node is terminal."""
        weight = priority if priority is not None else 0
        head = node = TTNode(suffix[0], weight)
        for ch in suffix[1:]:
            node.equal = TTNode(ch, weight)
            node = node.equal
        node.is_terminal = True
        node.terminal_priority = weight
        return head

    # lookup ----------------------------------------------------------------

    def _find(self, query: str) -> TTNode | None:
        """Return the node holding the last character of `query`, if the path exists."""
        node = self._root
        i = 0
        while node is not None:
            ch = query[i]
            if ch < node.letter:
                node = node.less
            elif ch > node.letter:
                node = node.greater
            elif i == len(query) - 1:
                return node
            else:
                i += 1
                node = node.equal
        return None

    def contains(self, query: str) -> bool:
        node = self._find(normalize(query))
        return node is not None and node.is_terminal

    # completion ------------------------------------------------------------

    def text_fill(self, query: str) -> str | None:
        """Return the first stored term that starts with `query`.

        Only `equal` links are followed below the prefix node, so the result
        is the continuation inserted first under that prefix, not
        necessarily the alphabetically smallest one.
        """
        query = normalize(query)
        node = self._find(query)
        if node is None:
            return None
        if node.is_terminal:
            return query

        suffix = []
        while not node.is_terminal:
            node = node.equal
            suffix.append(node.letter)
        return query + "".join(suffix)

    def text_fill_premium(self, query: str) -> str | None:
        """Return a high-priority stored term that starts with `query`.

        Greedy walk from the prefix node: the prefix node's priority is the
        starting threshold. Each step moves to the `equal` child, then keeps
        hopping sideways (`greater` first, then `less`) while a sibling's
        priority meets the threshold, raising the threshold to the priority
        of each node hopped to. The walk stops at the first terminal node whose terminal
        priority meets the threshold.
        """
        query = normalize(query)
        node = self._find(query)
        if node is None:
            return None
        if node.is_terminal:
            return query

        target = node.priority
        suffix = []
        while True:
            node = node.equal
            if node is None or node.priority < target:
                logger.debug("Priority walk for %r stalled at threshold=%d", query, target)
                return None
            while True:
                if node.greater is not None and node.greater.priority >= target:
                    node = node.greater
                elif node.less is not None and node.less.priority >= target:
                    node = node.less
                else:
                    break
                target = node.priority
            suffix.append(node.letter)
            if node.is_terminal and node.terminal_priority >= target:
                return query + "".join(suffix)

    # enumeration -----------------------------------------------------------

    def get_sorted_list(self) -> list[str]:
        """All stored terms in ascending order."""
        results: list[str] = []
        # (node, prefix, emit); pushed in reverse of less, self, equal, greater
        stack: list[tuple[TTNode | None, str, bool]] = [(self._root, "", False)]
        while stack:
            node, prefix, emit = stack.pop()
            if node is None:
                continue
            if emit:
                if node.is_terminal:
                    results.append(prefix + node.letter)
                continue
            stack.append((node.greater, prefix, False))
            stack.append((node.equal, prefix + node.letter, False))
            stack.append((node, prefix, True))
            stack.append((node.less, prefix, False))
        return results
