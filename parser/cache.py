# parser/cache.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Bounded least-recently-used cache for parse results

"""Bounded, thread-safe memo of parse results.

Parsing the same input twice yields the same immutable tree, so callers that
parse repeatedly (an interactive front end re-parsing on every keystroke, a
batch run over a file with duplicate lines) can keep a ``ParseCache`` and
pass it to ``parser.parse``. The cache is an explicit object owned by its
caller; the parsing functions never create one on their own.

Keys combine the raw input, the input format and the parse mode, so results
obtained under different ``ParserOptions`` never answer for each other.
"""

from collections import OrderedDict
from threading import Lock
from typing import Dict, Optional

from .ast_nodes import Expr

DEFAULT_CAPACITY = 128


class ParseCache:
    """Least-recently-used mapping from parse keys to expression trees.

    Lookups refresh an entry; inserting into a full cache evicts the entry
    that was used least recently. All operations hold a single lock, which is
    enough because stored trees are immutable.

    Attributes:
        capacity: Maximum number of entries kept
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("Cache capacity must be at least 1")
        self.capacity = capacity
        self._entries: "OrderedDict[str, Expr]" = OrderedDict()
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(source: str, input_format: str, mode: str) -> str:
        """Build the ``input|format|mode`` key for one parse request."""
        return f"{source}|{input_format}|{mode}"

    def get(self, key: str) -> Optional[Expr]:
        with self._lock:
            expr = self._entries.get(key)
            if expr is None:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return expr

    def put(self, key: str, expr: Expr) -> None:
        with self._lock:
            self._entries[key] = expr
            self._entries.move_to_end(key)
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> Dict[str, int]:
        """Return hit, miss and size counters."""
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._entries),
                "capacity": self.capacity,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries
