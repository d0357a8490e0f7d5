"""
Text to lexical tree, under any profile.
"""
from typing import Union
from . import lexical
from .profile import Profile
from .scanning import Scanner, Head, Tail

class LexicalParser(Scanner):
	""" Builds the lexical tree exactly as written; no role is looked up. """

	def on_atom(self, prefix, name, at):
		return lexical.Atom(prefix, name).at(self.where(at))

	def on_compound(self, connector, terms, at):
		return lexical.Compound(connector, terms).at(self.where(at))

	def on_set(self, left, terms, right, at):
		return lexical.Set(left, terms, right).at(self.where(at))

	def on_statement(self, copula, subject, predicate, at):
		return lexical.Statement(copula, subject, predicate).at(self.where(at))

	def on_sentence(self, term, tail: Tail, at):
		it = lexical.Sentence(term, tail.punctuation, tail.stamp, tail.truth)
		it.spot = self.where(at)
		return it

	def on_task(self, head: Head, sentence, at):
		it = lexical.Task(head.budget, sentence)
		it.spot = self.where(at)
		return it

def parse_lexical(text: str, profile: Profile) -> Union[lexical.Term, lexical.Sentence, lexical.Task]:
	""" Raises NarseseParseError if the text does not fit the profile. """
	return LexicalParser(profile, text).parse()
