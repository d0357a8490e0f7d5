"""
The typed AST for Narsese terms: a closed family of value classes.

Each concrete class knows its category, its capacity, and the profile role
under which its literal is filed. Terms are immutable and hashable, so they can
be members of the set-semantics compounds. The TermBuilder stages a term that is
being assembled one part at a time.
"""
from typing import Iterable, Iterator, Optional
from .ontology import Category, Capacity, ValueObject
from .profile import is_identifier_char

class TermError(ValueError): pass
class CapacityError(TermError): pass

def _check_terms(components) -> tuple:
	for c in components:
		if not isinstance(c, Term):
			raise TermError("Components must be terms, not %r." % (c,))
	return tuple(components)

class Term(ValueObject):
	category: Category
	capacity: Capacity
	role: str

	def components(self) -> tuple["Term", ...]: return ()

	def iter_atoms(self) -> Iterator["Atom"]:
		for c in self.components(): yield from c.iter_atoms()

	def contains(self, other: "Term") -> bool:
		return self == other or any(c.contains(other) for c in self.components())

	def __str__(self):
		from .formatter import NarseseFormatter
		from .profiles import ascii_profile
		return NarseseFormatter(ascii_profile()).format(self)

#########################

class Atom(Term):
	category = Category.ATOM
	capacity = Capacity.ATOM
	name: str
	def __init__(self, name: str):
		if not isinstance(name, str) or not name:
			raise TermError("%s needs a non-empty name, not %r." % (type(self).__name__, name))
		if not all(map(is_identifier_char, name)):
			raise TermError("%r cannot be written as the name of a %s." % (name, type(self).__name__))
		self.name = name
		super().__init__(name)
	def __repr__(self): return "%s(%r)" % (type(self).__name__, self.name)
	def iter_atoms(self): yield self

class Word(Atom): role = "word"
class VariableIndependent(Atom): role = "variable_independent"
class VariableDependent(Atom): role = "variable_dependent"
class VariableQuery(Atom): role = "variable_query"
class Operator(Atom): role = "operator"

class Placeholder(Atom):
	""" Use PLACEHOLDER rather than making more; they would all be equal anyway. """
	role = "placeholder"
	def __init__(self):
		self.name = ""
		ValueObject.__init__(self)
	def __repr__(self): return "PLACEHOLDER"

PLACEHOLDER = Placeholder()

class Interval(Atom):
	role = "interval"
	def __init__(self, interval: int):
		if isinstance(interval, bool) or not isinstance(interval, int) or interval < 0:
			raise TermError("An interval is a natural number, not %r." % (interval,))
		self.interval = interval
		self.name = str(interval)
		ValueObject.__init__(self, interval)
	def __repr__(self): return "Interval(%d)" % self.interval

#########################

class Compound(Term):
	category = Category.COMPOUND
	_components: tuple[Term, ...]
	def components(self): return self._components
	def __len__(self): return len(self._components)
	def __repr__(self): return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self._components)))

class SetCompound(Compound):
	""" Mathematical sets: duplicates collapse, and order does not count toward equality. """
	capacity = Capacity.SET
	def __init__(self, *components: Term):
		# First occurrence fixes the display order.
		unique = tuple(dict.fromkeys(_check_terms(components)))
		if not unique:
			raise TermError("%s needs at least one component." % type(self).__name__)
		self._components = unique
		super().__init__(frozenset(unique))

class SequenceCompound(Compound):
	capacity = Capacity.VEC
	def __init__(self, *components: Term):
		components = _check_terms(components)
		if not components:
			raise TermError("%s needs at least one component." % type(self).__name__)
		self._components = components
		super().__init__(components)

class BinaryCompound(Compound):
	capacity = Capacity.BINARY_VEC
	def __init__(self, left: Term, right: Term):
		self._components = _check_terms((left, right))
		super().__init__(*self._components)
	@property
	def left(self): return self._components[0]
	@property
	def right(self): return self._components[1]

class SetExtension(SetCompound): role = "set_extension"
class SetIntension(SetCompound): role = "set_intension"
class IntersectionExtension(SetCompound): role = "intersection_extension"
class IntersectionIntension(SetCompound): role = "intersection_intension"
class Conjunction(SetCompound): role = "conjunction"
class Disjunction(SetCompound): role = "disjunction"
class ConjunctionParallel(SetCompound): role = "conjunction_parallel"

class Product(SequenceCompound): role = "product"
class ConjunctionSequential(SequenceCompound): role = "conjunction_sequential"

class DifferenceExtension(BinaryCompound): role = "difference_extension"
class DifferenceIntension(BinaryCompound): role = "difference_intension"

class Negation(Compound):
	role = "negation"
	capacity = Capacity.UNARY
	def __init__(self, term: Term):
		self._components = _check_terms((term,))
		super().__init__(term)
	@property
	def term(self): return self._components[0]

class Image(Compound):
	"""
	The placeholder is not stored among the components.
	Its position is the index, which may equal the number of components
	when the placeholder comes last.
	"""
	capacity = Capacity.VEC
	def __init__(self, index: int, *components: Term):
		components = _check_terms(components)
		if not components:
			raise TermError("%s needs a component besides the placeholder." % type(self).__name__)
		if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= len(components):
			raise TermError("Image index %r is out of range for %d components." % (index, len(components)))
		self.index = index
		self._components = components
		super().__init__(index, components)
	def with_placeholder(self) -> tuple[Term, ...]:
		c = self._components
		return c[:self.index] + (PLACEHOLDER,) + c[self.index:]
	def __repr__(self): return "%s(%d, %s)" % (type(self).__name__, self.index, ", ".join(map(repr, self._components)))

class ImageExtension(Image): role = "image_extension"
class ImageIntension(Image): role = "image_intension"

#########################

class Statement(Term):
	category = Category.STATEMENT
	def __init__(self, subject: Term, predicate: Term):
		self.subject, self.predicate = _check_terms((subject, predicate))
		super().__init__(*self._statement_key())
	def _statement_key(self): return self.subject, self.predicate
	def components(self): return self.subject, self.predicate
	def __repr__(self): return "%s(%r, %r)" % (type(self).__name__, self.subject, self.predicate)

class OrderedStatement(Statement):
	capacity = Capacity.BINARY_VEC

class SymmetricStatement(Statement):
	""" Equal to its own mirror image: <A <-> B> is <B <-> A>. """
	capacity = Capacity.BINARY_SET
	def _statement_key(self): return frozenset((self.subject, self.predicate)),

class Inheritance(OrderedStatement): role = "inheritance"
class Implication(OrderedStatement): role = "implication"
class ImplicationPredictive(OrderedStatement): role = "implication_predictive"
class ImplicationConcurrent(OrderedStatement): role = "implication_concurrent"
class ImplicationRetrospective(OrderedStatement): role = "implication_retrospective"
class EquivalencePredictive(OrderedStatement): role = "equivalence_predictive"

class Similarity(SymmetricStatement): role = "similarity"
class Equivalence(SymmetricStatement): role = "equivalence"
class EquivalenceConcurrent(SymmetricStatement): role = "equivalence_concurrent"

# Copulas that are only shorthand for something above:

def new_instance(subject: Term, predicate: Term) -> Inheritance:
	return Inheritance(SetExtension(subject), predicate)

def new_property(subject: Term, predicate: Term) -> Inheritance:
	return Inheritance(subject, SetIntension(predicate))

def new_instance_property(subject: Term, predicate: Term) -> Inheritance:
	return Inheritance(SetExtension(subject), SetIntension(predicate))

def new_equivalence_retrospective(subject: Term, predicate: Term) -> EquivalencePredictive:
	return EquivalencePredictive(predicate, subject)

KINDS = {
	kind.role: kind
	for kind in (
		Word, Placeholder, VariableIndependent, VariableDependent, VariableQuery, Interval, Operator,
		SetExtension, SetIntension, IntersectionExtension, IntersectionIntension,
		DifferenceExtension, DifferenceIntension, Product, ImageExtension, ImageIntension,
		Conjunction, Disjunction, Negation, ConjunctionSequential, ConjunctionParallel,
		Inheritance, Similarity, Implication, Equivalence,
		ImplicationPredictive, ImplicationConcurrent, ImplicationRetrospective,
		EquivalencePredictive, EquivalenceConcurrent,
	)
}

SUGAR = {
	"instance": new_instance,
	"property": new_property,
	"instance_property": new_instance_property,
	"equivalence_retrospective": new_equivalence_retrospective,
}

#########################

class TermBuilder:
	"""
	Staging area for a term assembled piecemeal.
	Atoms accept a name; sequence-like and set-like compounds accept components.
	Every other request breaks the capacity of the kind, and is refused.
	"""
	def __init__(self, kind: type, index: Optional[int] = None):
		assert issubclass(kind, Term) and kind in KINDS.values(), kind
		self.kind = kind
		self.index = index
		self._name = None
		self._components = []

	def set_atom_name(self, name: str) -> "TermBuilder":
		kind = self.kind
		if kind.capacity is not Capacity.ATOM:
			raise CapacityError("%s is not an atom, so it has no name." % kind.__name__)
		if kind is Placeholder:
			if name: raise TermError("The placeholder takes no name, but got %r." % name)
		elif kind is Interval:
			if not (name.isascii() and name.isdigit()):
				raise TermError("An interval is a natural number, not %r." % name)
		elif not name:
			raise TermError("%s needs a non-empty name." % kind.__name__)
		elif not all(map(is_identifier_char, name)):
			raise TermError("%r cannot be written as the name of a %s." % (name, kind.__name__))
		self._name = name
		return self

	def push_components(self, *terms: Term) -> "TermBuilder":
		kind = self.kind
		if not kind.capacity.is_multi:
			raise CapacityError("%s has a fixed number of components; construct it whole." % kind.__name__)
		self._components.extend(_check_terms(terms))
		return self

	def build(self) -> Term:
		kind = self.kind
		if kind is Placeholder: return PLACEHOLDER
		if kind.capacity is Capacity.ATOM:
			if self._name is None:
				raise TermError("%s has no name yet." % kind.__name__)
			if kind is Interval: return Interval(int(self._name))
			return kind(self._name)
		if not kind.capacity.is_multi:
			raise CapacityError("%s has a fixed number of components; construct it whole." % kind.__name__)
		if issubclass(kind, Image): return kind(self.index, *self._components)
		return kind(*self._components)

def atoms_of(terms: Iterable[Term]) -> list[Atom]:
	""" Every atom mentioned anywhere, in order of appearance, without repeats. """
	return list(dict.fromkeys(a for t in terms for a in t.iter_atoms()))
