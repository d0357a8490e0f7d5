"""
Conversions between the lexical tree and the typed AST, relative to a profile.

Folding gives literals their meaning; unfolding writes meanings back as the
profile's literals. Unfolding never fails on a well-formed value. Folding fails
on any literal the profile does not know, and on parts that do not fit together.
"""
from decimal import Decimal
from typing import Union
from boozetools.parsing.interface import SemanticError
from boozetools.support.foundation import Visitor
from .profile import Profile
from .assembly import Assembler, FAILURES
from . import lexical, terms, sentences

class FoldError(SemanticError):
	""" Carries the lexical node which could not be folded. """
	def __init__(self, message: str, node):
		super().__init__(message, node)
		self.message, self.node = message, node
	def __str__(self): return "%s (in %r)" % (self.message, self.node)

class Fold(Visitor):
	def __init__(self, profile: Profile):
		self.assembler = Assembler(profile)

	def _assemble(self, node, method, *args):
		try: return method(*args)
		except FAILURES as ex: raise FoldError(str(ex), node) from ex

	def _each(self, nodes): return [self.visit(n) for n in nodes]

	def visit_Atom(self, it: lexical.Atom):
		return self._assemble(it, self.assembler.atom, it.prefix, it.name)

	def visit_Compound(self, it: lexical.Compound):
		return self._assemble(it, self.assembler.compound, it.connector, self._each(it.terms))

	def visit_Set(self, it: lexical.Set):
		# The right bracket must belong to the left one.
		brackets = self.assembler.profile.compound.set_brackets
		if it.left in brackets.lefts() and brackets.right_of(it.left) != it.right:
			raise FoldError("Set bracket %r does not close %r." % (it.right, it.left), it)
		return self._assemble(it, self.assembler.set, it.left, self._each(it.terms))

	def visit_Statement(self, it: lexical.Statement):
		subject, predicate = self.visit(it.subject), self.visit(it.predicate)
		return self._assemble(it, self.assembler.statement, it.copula, subject, predicate)

	def visit_Sentence(self, it: lexical.Sentence):
		term = self.visit(it.term)
		return self._assemble(it, self.assembler.sentence, term, it.punctuation, it.stamp, it.truth)

	def visit_Task(self, it: lexical.Task):
		sentence = self.visit(it.sentence)
		return self._assemble(it, self.assembler.task, it.budget, sentence)

def fold(value: Union[lexical.Term, lexical.Sentence, lexical.Task], profile: Profile):
	return Fold(profile).visit(value)

#########################

def numeral(value: float) -> str:
	""" The shortest decimal that reads back as the same float, never in exponent form. """
	text = repr(float(value))
	if "e" in text: text = format(Decimal(text), "f")
	return text

class Unfold(Visitor):
	def __init__(self, profile: Profile):
		self.profile = profile

	def _each(self, values): return [self.visit(v) for v in values]

	def visit_Atom(self, it: terms.Atom):
		return lexical.Atom(self.profile.atom.prefixes.literal[it.role], it.name)

	def visit_Compound(self, it: terms.Compound):
		connector = self.profile.compound.connectors.literal[it.role]
		return lexical.Compound(connector, self._each(it.components()))

	def visit_SetCompound(self, it: terms.SetCompound):
		brackets = self.profile.compound.set_literal.get(it.role)
		if brackets is None: return self.visit_Compound(it)
		return lexical.Set(brackets.left, self._each(it.components()), brackets.right)

	def visit_Image(self, it: terms.Image):
		connector = self.profile.compound.connectors.literal[it.role]
		return lexical.Compound(connector, self._each(it.with_placeholder()))

	def visit_Statement(self, it: terms.Statement):
		copula = self.profile.statement.copulas.literal[it.role]
		return lexical.Statement(copula, self.visit(it.subject), self.visit(it.predicate))

	def stamp(self, stamp: sentences.Stamp) -> str:
		if stamp.is_eternal(): return ""
		syntax = self.profile.sentence
		if stamp.is_fixed():
			left, right = syntax.fixed_stamp
			return left + str(stamp.time) + right
		return syntax.stamps.literal[stamp.kind]

	def visit_Sentence(self, it: sentences.Sentence):
		punctuation = self.profile.sentence.punctuations.literal[it.punctuation]
		truth = [numeral(v) for v in it.truth] if it.truth is not None else []
		return lexical.Sentence(self.visit(it.term), punctuation, self.stamp(it.stamp), truth)

	def visit_Task(self, it: sentences.Task):
		return lexical.Task([numeral(v) for v in it.budget], self.visit(it.sentence))

def unfold(value, profile: Profile):
	return Unfold(profile).visit(value)
