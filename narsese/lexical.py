"""
The untyped lexical tree.

Every non-term field keeps the raw text the profile wrote, numerals included,
so nothing is lost until the tree is folded into the typed AST.
Nodes may carry the spot (character offset) where they began in the source;
the spot plays no part in equality.
"""
from typing import Iterable, Optional, Sequence
from .ontology import Category, Capacity, ValueObject

class Term(ValueObject):
	category: Category
	capacity: Capacity
	spot: Optional[int] = None
	def at(self, spot: Optional[int]) -> "Term":
		self.spot = spot
		return self

class Atom(Term):
	category = Category.ATOM
	capacity = Capacity.ATOM
	def __init__(self, prefix: str, name: str):
		self.prefix, self.name = prefix, name
		super().__init__(prefix, name)
	def __repr__(self): return "Atom(%r, %r)" % (self.prefix, self.name)

class Compound(Term):
	category = Category.COMPOUND
	capacity = Capacity.VEC
	def __init__(self, connector: str, terms: Iterable[Term]):
		self.connector, self.terms = connector, tuple(terms)
		super().__init__(connector, self.terms)
	def __repr__(self): return "Compound(%r, %r)" % (self.connector, list(self.terms))

class Set(Term):
	category = Category.COMPOUND
	capacity = Capacity.VEC
	def __init__(self, left: str, terms: Iterable[Term], right: str):
		self.left, self.terms, self.right = left, tuple(terms), right
		super().__init__(left, self.terms, right)
	def __repr__(self): return "Set(%r, %r, %r)" % (self.left, list(self.terms), self.right)

class Statement(Term):
	category = Category.STATEMENT
	capacity = Capacity.BINARY_VEC
	def __init__(self, copula: str, subject: Term, predicate: Term):
		self.copula, self.subject, self.predicate = copula, subject, predicate
		super().__init__(copula, subject, predicate)
	@property
	def terms(self): return self.subject, self.predicate
	def __repr__(self): return "Statement(%r, %r, %r)" % (self.copula, self.subject, self.predicate)

class Sentence(ValueObject):
	"""
	The stamp is its full literal, brackets and all, or empty for eternal.
	The truth is the sequence of numeral strings between the truth brackets.
	"""
	spot: Optional[int] = None
	def __init__(self, term: Term, punctuation: str, stamp: str = "", truth: Sequence[str] = ()):
		self.term, self.punctuation, self.stamp, self.truth = term, punctuation, stamp, tuple(truth)
		super().__init__(term, punctuation, stamp, self.truth)
	def __repr__(self): return "Sentence(%r, %r, %r, %r)" % (self.term, self.punctuation, self.stamp, self.truth)

class Task(ValueObject):
	spot: Optional[int] = None
	def __init__(self, budget: Sequence[str], sentence: Sentence):
		self.budget, self.sentence = tuple(budget), sentence
		super().__init__(self.budget, sentence)
	def __repr__(self): return "Task(%r, %r)" % (self.budget, self.sentence)
