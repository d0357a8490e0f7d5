"""
The profile-directed scanner that both parsers share.

The scanner knows the shape of Narsese: an optional budget up front,
a term, and a tail of punctuation, stamp, and truth. The profile supplies
every literal. Subclasses supply the on_* constructors, in much the way
a parse-table application supplies its reduction methods, so the same
grammar can yield either the lexical tree or the typed AST.

The budget is read left-to-right and abandoned if it has no closing bracket,
since its bracket may double as an atom prefix. The tail is peeled from
the right with suffix lookups; without punctuation it is put back and
the whole text must be a bare term. Numerals in the tail are checked only
once the punctuation shows that there is a tail at all.
"""
import re
from typing import Any, NamedTuple, Optional
from boozetools.parsing.interface import ParseError
from .profile import Profile, Numerals

CONTEXT_RADIUS = 4
_DECIMAL = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_SIGNED_INTEGER = re.compile(r"[+-]?[0-9]+")

class NarseseParseError(ParseError):
	"""
	The offset is into the text as given, whitespace and all.
	The context is the few characters around it, for quick orientation.
	"""
	def __init__(self, message: str, text: str, offset: int):
		super().__init__(message, offset)
		self.message, self.text, self.offset = message, text, offset
		self.context = text[max(0, offset - CONTEXT_RADIUS):offset + CONTEXT_RADIUS + 1]
	def __str__(self): return "%s @ %d in %r" % (self.message, self.offset, self.context)

class Head(NamedTuple):
	budget: list[str]
	after: int
	at: int

class Tail(NamedTuple):
	term_end: int
	punctuation: str
	punctuation_at: int
	stamp: str
	stamp_at: int
	truth: list[str]
	truth_at: int

class Scanner:
	""" One scanner per parse: it holds the text and a cursor limit. """

	def __init__(self, profile: Profile, text: str):
		self.profile = profile
		self.source = text
		if profile.space.strip:
			is_space = profile.space.is_space
			self._origin = [i for i, c in enumerate(text) if not is_space(c)]
			self.text = "".join(text[i] for i in self._origin)
		else:
			self._origin = None
			self.text = text
		self.end = len(self.text)

	# Constructors the subclass provides:

	def on_atom(self, prefix: str, name: str, at: int): raise NotImplementedError(type(self))
	def on_compound(self, connector: str, terms: list, at: int): raise NotImplementedError(type(self))
	def on_set(self, left: str, terms: list, right: str, at: int): raise NotImplementedError(type(self))
	def on_statement(self, copula: str, subject, predicate, at: int): raise NotImplementedError(type(self))
	def on_sentence(self, term, tail: Tail, at: int): raise NotImplementedError(type(self))
	def on_task(self, head: Head, sentence, at: int): raise NotImplementedError(type(self))

	# Plumbing:

	def where(self, at: int) -> int:
		""" Translate an index into the scanned text back to the text as given. """
		if self._origin is None: return at
		if at < len(self._origin): return self._origin[at]
		return self._origin[-1] + 1 if self._origin else 0

	def error(self, message: str, at: int):
		raise NarseseParseError(message, self.source, self.where(at))

	def _starts(self, literal: str, pos: int) -> bool:
		return bool(literal) and self.text.startswith(literal, pos, self.end)

	def _skip_space(self, pos: int) -> int:
		is_space = self.profile.space.is_space
		while pos < self.end and is_space(self.text[pos]): pos += 1
		return pos

	def _skip_space_back(self, end: int, start: int) -> int:
		is_space = self.profile.space.is_space
		while end > start and is_space(self.text[end - 1]): end -= 1
		return end

	# The whole thing:

	def parse(self) -> Any:
		start = self._skip_space(0)
		end = self._skip_space_back(len(self.text), start)
		if start >= end: self.error("There is no Narsese here.", start)
		head = self._head(start, end)
		tail = self._tail(head.after if head else start, end)
		if tail is None:
			return self._whole_term(start, end)
		term_start = head.after if head else start
		self.end = tail.term_end
		term_start = self._skip_space(term_start)
		if term_start >= tail.term_end:
			self.error("A sentence needs a term.", term_start)
		term = self._whole_term(term_start, tail.term_end)
		sentence = self.on_sentence(term, tail, term_start)
		if head is None: return sentence
		return self.on_task(head, sentence, start)

	def _whole_term(self, start: int, end: int):
		self.end = end
		term, pos = self._term(start)
		pos = self._skip_space(pos)
		if pos < end:
			if self.profile.sentence.punctuations.dictionary.match_prefix(self.text, pos, end):
				self.error("Punctuation appears more than once, or out of place.", pos)
			self.error("Unexpected text after the term.", pos)
		return term

	# Budget, punctuation, stamp, truth:

	def _numerals(self, content: str, numerals: Numerals, at: int, what: str) -> list[str]:
		if not content: return []
		values = content.split(numerals.separator) if numerals.separator else [content]
		if len(values) > numerals.limit:
			self.error("A %s has at most %d components, not %d." % (what, numerals.limit, len(values)), at)
		for v in values:
			if not _DECIMAL.fullmatch(v):
				self.error("%r is not a decimal number, so it cannot be part of a %s." % (v, what), at)
			if not 0.0 <= float(v) <= 1.0:
				self.error("The %s component %s lies outside [0, 1]." % (what, v), at)
		return values

	@staticmethod
	def _all_numeral(content: str, numerals: Numerals) -> bool:
		pos = 0
		while pos < len(content):
			if numerals.separator and content.startswith(numerals.separator, pos): pos += len(numerals.separator)
			elif numerals.is_content(content[pos]): pos += 1
			else: return False
		return True

	def _atom_spans(self, start: int, stop: int) -> bool:
		""" Would an atom read from start run on past stop? """
		prefix = self.profile.atom.prefixes.dictionary.match_prefix(self.text, start, self.end)
		return prefix is not None and self._identifier_end(start + prefix.length) > stop

	def _head(self, start: int, end: int) -> Optional[Head]:
		budget = self.profile.task.budget
		left, right = budget.brackets
		if not left or not self.text.startswith(left, start, end): return None
		after = start + len(left)
		stop = self.text.find(right, after, end)
		if stop < 0: return None
		content = self.text[after:stop]
		if not self._all_numeral(content, budget) and self._atom_spans(start, stop):
			# Not a budget after all: the bracket begins an atom.
			return None
		return Head(self._numerals(content, budget, start, "budget"), stop + len(right), start)

	def _bracketed_suffix(self, numerals: Numerals, start: int, end: int) -> Optional[tuple[str, int]]:
		left, right = numerals.brackets
		if not left or not self.text.endswith(right, start, end): return None
		stop = end - len(right)
		pos = self.text.rfind(left, start, stop)
		if pos < 0: return None
		return self.text[pos + len(left):stop], pos

	def _tail(self, start: int, end: int) -> Optional[Tail]:
		sentence = self.profile.sentence
		text = self.text

		content, truth_at = "", end
		found = self._bracketed_suffix(sentence.truth, start, end)
		if found is not None:
			content, truth_at = found
			end = self._skip_space_back(truth_at, start)

		stamp, stamp_at, odd_stamp = "", end, None
		symbolic = sentence.stamps.dictionary.match_suffix(text, end, start)
		if symbolic is not None:
			stamp, stamp_at = symbolic.entry, end - symbolic.length
		else:
			left, right = sentence.fixed_stamp
			if text.endswith(right, start, end):
				pos = end - len(right)
				while pos > start and sentence.is_stamp_content(text[pos - 1]): pos -= 1
				if left and text.endswith(left, start, pos):
					if not _SIGNED_INTEGER.fullmatch(text[pos:end - len(right)]): odd_stamp = pos
					stamp, stamp_at = text[pos - len(left):end], pos - len(left)
		if stamp: end = self._skip_space_back(stamp_at, start)

		punctuation = sentence.punctuations.dictionary.match_suffix(text, end, start)
		if punctuation is None: return None
		# Only now is it certain that this is a sentence and not a bare term.
		if odd_stamp is not None:
			self.error("A fixed stamp needs a whole number of time-steps.", odd_stamp)
		truth = self._numerals(content, sentence.truth, truth_at, "truth-value")
		punctuation_at = end - punctuation.length
		term_end = self._skip_space_back(punctuation_at, start)
		return Tail(term_end, punctuation.entry, punctuation_at, stamp, stamp_at, truth, truth_at)

	# Terms:

	def _term(self, pos: int):
		pos = self._skip_space(pos)
		if pos >= self.end: self.error("Expected a term here.", pos)
		compound, statement = self.profile.compound, self.profile.statement
		found = compound.set_brackets.match_left(self.text, pos, self.end)
		if found is not None: return self._set(pos, *found)
		if self._starts(compound.brackets.left, pos): return self._compound(pos)
		if self._starts(statement.brackets.left, pos): return self._statement(pos)
		return self._atom(pos)

	def _unclosed(self, pos: int, right: str):
		if pos >= self.end:
			self.error("Missing %r to close the bracket." % right, pos)
		if self.profile.compound.set_brackets.match_right(self.text, pos, self.end) or any(
			self._starts(b, pos) for b in (self.profile.compound.brackets.right, self.profile.statement.brackets.right)
		):
			self.error("Mismatched bracket: expected %r here." % right, pos)
		self.error("Expected %r or %r here." % (self.profile.compound.separator, right), pos)

	def _items(self, pos: int, right: str, what: str) -> tuple[list, int]:
		separator = self.profile.compound.separator
		pos = self._skip_space(pos)
		if self._starts(right, pos):
			self.error("An empty %s is not allowed." % what, pos)
		items = []
		while True:
			term, pos = self._term(pos)
			items.append(term)
			pos = self._skip_space(pos)
			if self._starts(separator, pos): pos += len(separator)
			elif self._starts(right, pos): return items, pos + len(right)
			else: self._unclosed(pos, right)

	def _set(self, pos: int, opening, right: str):
		items, after = self._items(pos + opening.length, right, "set")
		return self.on_set(opening.entry, items, right, pos), after

	def _compound(self, pos: int):
		compound = self.profile.compound
		cursor = self._skip_space(pos + len(compound.brackets.left))
		connector = compound.connectors.dictionary.match_prefix(self.text, cursor, self.end)
		if connector is None:
			self.error("A compound term must begin with a connector.", cursor)
		cursor = self._skip_space(cursor + connector.length)
		if not self._starts(compound.separator, cursor):
			self.error("Expected %r after the connector %r." % (compound.separator, connector.entry), cursor)
		items, after = self._items(cursor + len(compound.separator), compound.brackets.right, "compound")
		return self.on_compound(connector.entry, items, pos), after

	def _statement(self, pos: int):
		statement = self.profile.statement
		subject, cursor = self._term(pos + len(statement.brackets.left))
		cursor = self._skip_space(cursor)
		copula = statement.copulas.dictionary.match_prefix(self.text, cursor, self.end)
		if copula is None:
			self.error("Expected a copula here.", cursor)
		predicate, cursor = self._term(cursor + copula.length)
		cursor = self._skip_space(cursor)
		if not self._starts(statement.brackets.right, cursor):
			self._unclosed(cursor, statement.brackets.right)
		return self.on_statement(copula.entry, subject, predicate, pos), cursor + len(statement.brackets.right)

	def _identifier_end(self, pos: int) -> int:
		is_identifier = self.profile.atom.is_identifier
		terminators = self.profile.terminators
		while pos < self.end and is_identifier(self.text[pos]):
			if terminators.match_prefix(self.text, pos, self.end): break
			pos += 1
		return pos

	def _atom(self, pos: int):
		prefixes = self.profile.atom.prefixes
		prefix = prefixes.dictionary.match_prefix(self.text, pos, self.end)
		if prefix is None:
			self.error("Unknown atom prefix.", pos)
		start = pos + prefix.length
		stop = self._identifier_end(start)
		name = self.text[start:stop]
		if not name and prefix.entry != prefixes.literal["placeholder"]:
			if prefix.entry: self.error("The prefix %r needs a name after it." % prefix.entry, start)
			else: self.error("Expected a term here.", pos)
		return self.on_atom(prefix.entry, name, pos), stop
