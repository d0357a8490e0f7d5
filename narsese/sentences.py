"""
Truth, budget, stamp, and the sentence and task wrappers of the typed AST.
"""
from typing import NamedTuple, Optional
from .ontology import ValueObject
from .terms import Term

class ValueDomainError(ValueError): pass
class MissingComponent(LookupError): pass

class UnitValues(ValueObject):
	"""
	A short run of numbers from the unit interval.
	Subclasses say how many are allowed and what each is called.
	"""
	names: tuple[str, ...]

	def __init__(self, *values: float):
		if len(values) > len(self.names):
			raise ValueDomainError("%s takes at most %d values, not %d." % (type(self).__name__, len(self.names), len(values)))
		checked = []
		for v in values:
			if isinstance(v, bool) or not isinstance(v, (int, float)):
				raise ValueDomainError("%r is not a number." % (v,))
			v = float(v)
			if not 0.0 <= v <= 1.0:
				raise ValueDomainError("%r lies outside [0, 1]." % v)
			checked.append(v)
		self.values = tuple(checked)
		super().__init__(*self.values)

	def __len__(self): return len(self.values)
	def __iter__(self): return iter(self.values)
	def __repr__(self): return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self.values)))

	def is_empty(self): return not self.values

	def _component(self, i: int) -> float:
		if i < len(self.values): return self.values[i]
		raise MissingComponent("%r has no %s." % (self, self.names[i]))

class Truth(UnitValues):
	names = ("frequency", "confidence")
	def is_single(self): return len(self.values) == 1
	def is_double(self): return len(self.values) == 2
	@property
	def frequency(self) -> float: return self._component(0)
	@property
	def confidence(self) -> float: return self._component(1)
	f = frequency
	c = confidence

class Budget(UnitValues):
	names = ("priority", "durability", "quality")
	@property
	def priority(self) -> float: return self._component(0)
	@property
	def durability(self) -> float: return self._component(1)
	@property
	def quality(self) -> float: return self._component(2)
	p = priority
	d = durability
	q = quality

#########################

class Stamp(NamedTuple):
	kind: str
	time: Optional[int] = None

	@staticmethod
	def fixed(time: int) -> "Stamp":
		if isinstance(time, bool) or not isinstance(time, int):
			raise ValueDomainError("A fixed stamp needs an integer time, not %r." % (time,))
		return Stamp("fixed", time)

	def is_eternal(self): return self.kind == "eternal"
	def is_past(self): return self.kind == "past"
	def is_present(self): return self.kind == "present"
	def is_future(self): return self.kind == "future"
	def is_fixed(self): return self.kind == "fixed"

	def __repr__(self):
		return "Stamp.fixed(%d)" % self.time if self.is_fixed() else self.kind.upper()

ETERNAL = Stamp("eternal")
PAST = Stamp("past")
PRESENT = Stamp("present")
FUTURE = Stamp("future")
SYMBOLIC_STAMPS = {s.kind: s for s in (PAST, PRESENT, FUTURE)}

#########################

class Sentence(ValueObject):
	""" The punctuation is implied by the class. Questions and quests carry no truth. """
	punctuation: str
	has_truth: bool
	truth: Optional[Truth]

	def __init__(self, term: Term, truth: Optional[Truth], stamp: Stamp):
		if not isinstance(term, Term): raise TypeError("A sentence is about a term, not %r." % (term,))
		if not isinstance(stamp, Stamp): raise TypeError("Not a stamp: %r" % (stamp,))
		self.term, self.truth, self.stamp = term, truth, stamp
		super().__init__(term, truth, stamp)

	def __repr__(self):
		if self.truth is None: return "%s(%r, %r)" % (type(self).__name__, self.term, self.stamp)
		return "%s(%r, %r, %r)" % (type(self).__name__, self.term, self.truth, self.stamp)

	def __str__(self):
		from .formatter import NarseseFormatter
		from .profiles import ascii_profile
		return NarseseFormatter(ascii_profile()).format(self)

	@staticmethod
	def from_punctuation(punctuation: str, term: Term, truth: Optional[Truth] = None, stamp: Stamp = ETERNAL) -> "Sentence":
		kind = PUNCTUATIONS[punctuation]
		if not kind.has_truth:
			if truth is not None and not truth.is_empty():
				raise ValueDomainError("A %s carries no truth value." % punctuation)
			return kind(term, stamp)
		return kind(term, truth or Truth(), stamp)

class Judgement(Sentence):
	punctuation = "judgement"
	has_truth = True
	def __init__(self, term: Term, truth: Truth = Truth(), stamp: Stamp = ETERNAL):
		if not isinstance(truth, Truth): raise TypeError("Not a truth-value: %r" % (truth,))
		super().__init__(term, truth, stamp)

class Goal(Sentence):
	punctuation = "goal"
	has_truth = True
	def __init__(self, term: Term, truth: Truth = Truth(), stamp: Stamp = ETERNAL):
		if not isinstance(truth, Truth): raise TypeError("Not a truth-value: %r" % (truth,))
		super().__init__(term, truth, stamp)

class Question(Sentence):
	punctuation = "question"
	has_truth = False
	def __init__(self, term: Term, stamp: Stamp = ETERNAL):
		super().__init__(term, None, stamp)

class Quest(Sentence):
	punctuation = "quest"
	has_truth = False
	def __init__(self, term: Term, stamp: Stamp = ETERNAL):
		super().__init__(term, None, stamp)

PUNCTUATIONS = {kind.punctuation: kind for kind in (Judgement, Goal, Question, Quest)}

class Task(ValueObject):
	def __init__(self, sentence: Sentence, budget: Budget = Budget()):
		if not isinstance(sentence, Sentence): raise TypeError("A task wraps a sentence, not %r." % (sentence,))
		if not isinstance(budget, Budget): raise TypeError("Not a budget: %r" % (budget,))
		self.sentence, self.budget = sentence, budget
		super().__init__(sentence, budget)

	@staticmethod
	def from_sentence(sentence: Sentence) -> "Task":
		""" Promote a bare sentence with the empty budget. """
		return Task(sentence, Budget())

	@property
	def term(self) -> Term: return self.sentence.term
	@property
	def punctuation(self) -> str: return self.sentence.punctuation
	@property
	def truth(self) -> Optional[Truth]: return self.sentence.truth
	@property
	def stamp(self) -> Stamp: return self.sentence.stamp

	def __repr__(self): return "Task(%r, %r)" % (self.sentence, self.budget)
	def __str__(self):
		from .formatter import NarseseFormatter
		from .profiles import ascii_profile
		return NarseseFormatter(ascii_profile()).format(self)
