"""
Longest-match dictionaries over literal strings.

Every piece of fixed syntax in a profile lives in one of these.
Entries are kept sorted longest-first, so a linear scan finds the longest match.
At the sizes involved (a dozen or so literals) that beats building a trie.
"""
from typing import Iterable, NamedTuple, Optional

class DuplicateEntry(KeyError): pass

class Match(NamedTuple):
	entry: str
	length: int

class MatchDictionary:
	""" An immutable set of literals with longest-prefix and longest-suffix lookup. """
	def __init__(self, entries: Iterable[str] = ()):
		given = []
		for e in entries:
			if e in given: raise DuplicateEntry(e)
			given.append(e)
		# sorted() is stable, so equal-length entries keep their given order.
		self._entries = tuple(sorted(given, key=lambda e:-len(e)))

	def __contains__(self, entry: str) -> bool: return entry in self._entries
	def __iter__(self): return iter(self._entries)
	def __len__(self): return len(self._entries)
	def __repr__(self): return "MatchDictionary(%r)" % (self._entries,)

	def match_prefix(self, text: str, cursor: int = 0, end: Optional[int] = None) -> Optional[Match]:
		if end is None: end = len(text)
		for entry in self._entries:
			if text.startswith(entry, cursor, end):
				return Match(entry, len(entry))

	def match_suffix(self, text: str, end: Optional[int] = None, start: int = 0) -> Optional[Match]:
		if end is None: end = len(text)
		for entry in self._entries:
			if text.endswith(entry, start, end):
				return Match(entry, len(entry))

class PairedDictionary:
	"""
	Bracket families: each left literal has exactly one right literal.
	Right literals may repeat; match_right then reports the first left registered for it.
	"""
	def __init__(self, pairs: Iterable[tuple[str, str]]):
		pairs = tuple(pairs)
		self._lefts = MatchDictionary(left for left, right in pairs)
		self._rights = MatchDictionary(dict.fromkeys(right for left, right in pairs))
		self._right_of = dict(pairs)
		self._left_of = {}
		for left, right in pairs:
			self._left_of.setdefault(right, left)

	def __iter__(self): return iter(self._right_of.items())
	def __len__(self): return len(self._right_of)
	def __repr__(self): return "PairedDictionary(%r)" % (tuple(self),)

	def lefts(self) -> MatchDictionary: return self._lefts
	def rights(self) -> MatchDictionary: return self._rights
	def right_of(self, left: str) -> str: return self._right_of[left]
	def left_of(self, right: str) -> str: return self._left_of[right]

	def match_left(self, text: str, cursor: int = 0, end: Optional[int] = None) -> Optional[tuple[Match, str]]:
		found = self._lefts.match_prefix(text, cursor, end)
		if found is not None: return found, self._right_of[found.entry]

	def match_right(self, text: str, cursor: int = 0, end: Optional[int] = None) -> Optional[tuple[Match, str]]:
		found = self._rights.match_prefix(text, cursor, end)
		if found is not None: return found, self._left_of[found.entry]
