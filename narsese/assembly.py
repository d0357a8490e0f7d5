"""
Role dispatch: from the literals a profile wrote to the typed values they denote.

The AST parser calls in here as it goes, and so does the fold from a lexical tree.
Each method takes raw literals (and already-built sub-terms) and either
returns a typed value or raises one of the FAILURES below.
"""
from typing import Sequence
from boozetools.parsing.interface import SemanticError
from .profile import Profile
from . import terms, sentences
from .terms import Term, TermBuilder, KINDS, SUGAR, PLACEHOLDER

class AssemblyError(SemanticError):
	""" The literal is foreign to the profile, or the parts do not fit together. """
	def __init__(self, message: str):
		super().__init__(message)
		self.message = message
	def __str__(self): return self.message

FAILURES = (AssemblyError, terms.TermError, sentences.ValueDomainError)

class Assembler:
	def __init__(self, profile: Profile):
		self.profile = profile

	def atom(self, prefix: str, name: str) -> Term:
		role = self.profile.atom.prefixes.role.get(prefix)
		if role is None: raise AssemblyError("Unknown atom prefix %r." % prefix)
		return TermBuilder(KINDS[role]).set_atom_name(name).build()

	def compound(self, connector: str, components: Sequence[Term]) -> Term:
		role = self.profile.compound.connectors.role.get(connector)
		if role is None: raise AssemblyError("Unknown connector %r." % connector)
		kind = KINDS[role]
		if issubclass(kind, terms.Image):
			spots = [i for i, c in enumerate(components) if c == PLACEHOLDER]
			if len(spots) != 1:
				raise AssemblyError("An image needs exactly one placeholder, not %d." % len(spots))
			i = spots[0]
			return kind(i, *components[:i], *components[i+1:])
		if kind.capacity.is_multi:
			return TermBuilder(kind).push_components(*components).build()
		arity = kind.capacity.base_num
		if len(components) != arity:
			raise AssemblyError("%s takes exactly %d component(s), not %d." % (kind.__name__, arity, len(components)))
		return kind(*components)

	def set(self, left: str, components: Sequence[Term]) -> Term:
		role = self.profile.compound.set_role.get(left)
		if role is None: raise AssemblyError("Unknown set bracket %r." % left)
		return TermBuilder(KINDS[role]).push_components(*components).build()

	def statement(self, copula: str, subject: Term, predicate: Term) -> Term:
		role = self.profile.statement.copulas.role.get(copula)
		if role is None: raise AssemblyError("Unknown copula %r." % copula)
		if role in SUGAR: return SUGAR[role](subject, predicate)
		return KINDS[role](subject, predicate)

	def stamp(self, literal: str) -> sentences.Stamp:
		if not literal: return sentences.ETERNAL
		syntax = self.profile.sentence
		role = syntax.stamps.role.get(literal)
		if role is not None: return sentences.SYMBOLIC_STAMPS[role]
		left, right = syntax.fixed_stamp
		if literal.startswith(left) and literal.endswith(right) and len(literal) > len(left) + len(right):
			content = literal[len(left):len(literal)-len(right)]
			try: return sentences.Stamp.fixed(int(content))
			except ValueError: pass
		raise AssemblyError("Unknown stamp %r." % literal)

	def sentence(self, term: Term, punctuation: str, stamp: str, truth: Sequence[str]) -> sentences.Sentence:
		role = self.profile.sentence.punctuations.role.get(punctuation)
		if role is None: raise AssemblyError("Unknown punctuation %r." % punctuation)
		return sentences.Sentence.from_punctuation(role, term, sentences.Truth(*_floats(truth)), self.stamp(stamp))

	def task(self, budget: Sequence[str], sentence: sentences.Sentence) -> sentences.Task:
		return sentences.Task(sentence, sentences.Budget(*_floats(budget)))

def _floats(numerals: Sequence[str]) -> list[float]:
	try: return [float(n) for n in numerals]
	except ValueError as ex: raise AssemblyError(str(ex)) from None
