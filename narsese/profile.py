"""
A syntax profile fully determines one concrete Narsese notation.

Each literal is registered under the role it plays (word, inheritance, judgement, ...).
The sub-records derive their match-dictionaries from those role tables,
so the parser and the formatters never mention a literal directly.
"""
from typing import Callable, NamedTuple, Iterable
from .dictionary import MatchDictionary, PairedDictionary, DuplicateEntry

ATOM_ROLES = (
	"word", "placeholder",
	"variable_independent", "variable_dependent", "variable_query",
	"interval", "operator",
)
SET_ROLES = ("set_extension", "set_intension")
CONNECTOR_ROLES = (
	"intersection_extension", "intersection_intension",
	"difference_extension", "difference_intension",
	"product", "image_extension", "image_intension",
	"conjunction", "disjunction", "negation",
	"conjunction_sequential", "conjunction_parallel",
)
COPULA_ROLES = (
	"inheritance", "similarity", "implication", "equivalence",
	"instance", "property", "instance_property",
	"implication_predictive", "implication_concurrent", "implication_retrospective",
	"equivalence_predictive", "equivalence_concurrent", "equivalence_retrospective",
)
PUNCTUATION_ROLES = ("judgement", "goal", "question", "quest")
STAMP_ROLES = ("past", "present", "future")

class ProfileError(ValueError): pass

def is_identifier_char(c: str) -> bool:
	return c.isalnum() or c in "_-" or c > "\U0001f2ff"

def is_numeral_char(c: str) -> bool:
	return c.isdigit() or c == "."

def is_stamp_char(c: str) -> bool:
	return c.isdigit() or c in "+-"

class Brackets(NamedTuple):
	left: str
	right: str

class Vocabulary:
	""" A role table: literal by role, role by literal, and the match-dictionary over all of them. """
	def __init__(self, roles: Iterable[str], literals: dict[str, str]):
		roles = tuple(roles)
		missing = [r for r in roles if r not in literals]
		extra = [r for r in literals if r not in roles]
		if missing or extra:
			raise ProfileError("Role table mismatch; missing %r, unknown %r" % (missing, extra))
		self.literal = {r: literals[r] for r in roles}
		try: self.dictionary = MatchDictionary(self.literal.values())
		except DuplicateEntry as ex:
			raise ProfileError("Literal %r plays more than one role." % ex.args[0]) from None
		self.role = {lit: r for r, lit in self.literal.items()}
	def __iter__(self): return iter(self.dictionary)
	def __repr__(self): return "Vocabulary(%r)" % self.literal

class Numerals(NamedTuple):
	""" A bracketed list of decimal components, as truth and budget values are written. """
	brackets: Brackets
	separator: str
	is_content: Callable[[str], bool]
	limit: int

class SpaceSyntax(NamedTuple):
	is_space: Callable[[str], bool] = str.isspace
	strip: bool = True
	format_terms: str = " "
	format_items: str = " "

class AtomSyntax:
	def __init__(self, prefixes: dict[str, str], is_identifier: Callable[[str], bool] = is_identifier_char):
		self.prefixes = Vocabulary(ATOM_ROLES, prefixes)
		self.is_identifier = is_identifier

class CompoundSyntax:
	def __init__(self, brackets: tuple[str, str], separator: str, set_brackets: dict[str, tuple[str, str]], connectors: dict[str, str]):
		self.brackets = Brackets(*brackets)
		self.separator = separator
		self.set_literal = {r: Brackets(*set_brackets[r]) for r in SET_ROLES}
		try: self.set_brackets = PairedDictionary(self.set_literal.values())
		except DuplicateEntry as ex:
			raise ProfileError("Set bracket %r is used twice." % ex.args[0]) from None
		self.set_role = {b.left: r for r, b in self.set_literal.items()}
		self.connectors = Vocabulary(CONNECTOR_ROLES, connectors)

class StatementSyntax:
	def __init__(self, brackets: tuple[str, str], copulas: dict[str, str]):
		self.brackets = Brackets(*brackets)
		self.copulas = Vocabulary(COPULA_ROLES, copulas)

class SentenceSyntax:
	"""
	Symbolic stamps (past, present, future) are stored with their brackets attached,
	so that one suffix lookup recognizes them. The fixed-time stamp keeps a bracket pair
	because a signed integer sits between its halves.
	"""
	def __init__(
			self, punctuations: dict[str, str], stamps: dict[str, str],
			truth_brackets: tuple[str, str], truth_separator: str,
			stamp_brackets: tuple[str, str] = ("", ""),
			is_stamp_content: Callable[[str], bool] = is_stamp_char,
			is_truth_content: Callable[[str], bool] = is_numeral_char,
	):
		self.punctuations = Vocabulary(PUNCTUATION_ROLES, punctuations)
		left, right = stamp_brackets
		self.stamps = Vocabulary(STAMP_ROLES, {r: left + stamps[r] + right for r in STAMP_ROLES})
		self.fixed_stamp = Brackets(left + stamps["fixed"], right)
		self.is_stamp_content = is_stamp_content
		self.truth = Numerals(Brackets(*truth_brackets), truth_separator, is_truth_content, 2)

class TaskSyntax:
	def __init__(self, budget_brackets: tuple[str, str], budget_separator: str, is_budget_content: Callable[[str], bool] = is_numeral_char):
		self.budget = Numerals(Brackets(*budget_brackets), budget_separator, is_budget_content, 3)

class Profile:
	""" Immutable once built; share it freely. """
	def __init__(self, name: str, *, space: SpaceSyntax, atom: AtomSyntax, compound: CompoundSyntax, statement: StatementSyntax, sentence: SentenceSyntax, task: TaskSyntax):
		self.name = name
		self.space = space
		self.atom = atom
		self.compound = compound
		self.statement = statement
		self.sentence = sentence
		self.task = task
		self.terminators = MatchDictionary(dict.fromkeys(self._terminating_literals()))
		self._check()

	def __repr__(self): return "<Profile %s>" % self.name

	def _brackets(self) -> list[str]:
		found = [*self.compound.brackets, *self.statement.brackets]
		for b in self.compound.set_literal.values(): found.extend(b)
		return found

	def _terminating_literals(self):
		"""
		Wherever one of these begins, an atom's name ends,
		even if the characters would otherwise pass for identifier characters.
		"""
		yield from self.statement.copulas
		yield self.compound.separator
		yield self.compound.brackets.right
		yield self.statement.brackets.right
		for b in self.compound.set_literal.values(): yield b.right

	def _check(self):
		if self.atom.prefixes.literal["word"] != "":
			raise ProfileError("The word prefix must be empty.")
		structural = set(self._brackets())
		structural.add(self.compound.separator)
		for table in (self.compound.connectors, self.statement.copulas):
			for lit in table:
				if lit in structural:
					raise ProfileError("%r cannot be both structure and operator." % lit)
		if not self.space.strip:
			delimiters = [*self._brackets(), self.compound.separator]
			delimiters.extend(self.compound.connectors)
			delimiters.extend(self.statement.copulas)
			delimiters.extend(p for p in self.atom.prefixes if p)
			for lit in delimiters:
				if lit and self.atom.is_identifier(lit[0]):
					raise ProfileError("%r begins with an identifier character, but whitespace is significant." % lit)
