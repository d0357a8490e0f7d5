"""
Writing Narsese back out as text under a profile.

The lexical formatter owns the templates. The AST formatter unfolds to
a lexical tree first, so both share exactly one notion of layout.
"""
from boozetools.support.foundation import Visitor
from .profile import Profile, Numerals
from .fold import Unfold
from . import lexical

class LexicalFormatter(Visitor):
	def __init__(self, profile: Profile):
		self.profile = profile
		space = profile.space
		self._item_sep = profile.compound.separator + space.format_terms

	def format(self, value) -> str:
		return self.visit(value)

	def _join(self, nodes) -> str:
		return self._item_sep.join(self.visit(n) for n in nodes)

	@staticmethod
	def _numerals(numerals: Numerals, values) -> str:
		return numerals.brackets.left + numerals.separator.join(values) + numerals.brackets.right

	def visit_Atom(self, it: lexical.Atom):
		return it.prefix + it.name

	def visit_Compound(self, it: lexical.Compound):
		brackets = self.profile.compound.brackets
		return brackets.left + it.connector + self._item_sep + self._join(it.terms) + brackets.right

	def visit_Set(self, it: lexical.Set):
		return it.left + self._join(it.terms) + it.right

	def visit_Statement(self, it: lexical.Statement):
		brackets = self.profile.statement.brackets
		space = self.profile.space.format_terms
		return brackets.left + self.visit(it.subject) + space + it.copula + space + self.visit(it.predicate) + brackets.right

	def visit_Sentence(self, it: lexical.Sentence):
		truth = self._numerals(self.profile.sentence.truth, it.truth) if it.truth else ""
		items = [self.visit(it.term) + it.punctuation, it.stamp, truth]
		return self.profile.space.format_items.join(i for i in items if i)

	def visit_Task(self, it: lexical.Task):
		budget = self._numerals(self.profile.task.budget, it.budget)
		return budget + self.profile.space.format_items + self.visit(it.sentence)

class NarseseFormatter:
	""" Formats typed values: terms, sentences, and tasks. """
	def __init__(self, profile: Profile):
		self._unfold = Unfold(profile)
		self._lexical = LexicalFormatter(profile)

	def format(self, value) -> str:
		return self._lexical.format(self._unfold.visit(value))
