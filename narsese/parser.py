"""
Text straight to the typed AST.
"""
from typing import Union
from .profile import Profile
from .scanning import Scanner, Head, Tail
from .assembly import Assembler, FAILURES
from .terms import Term
from .sentences import Sentence, Task

class NarseseParser(Scanner):
	"""
	Same scan as the lexical parser, but each constructor dispatches on role
	as soon as its parts are known. Semantic trouble becomes a parse error
	at the spot where the offending construct began.
	"""
	def __init__(self, profile: Profile, text: str):
		super().__init__(profile, text)
		self.assembler = Assembler(profile)

	def _assemble(self, at: int, method, *args):
		try: return method(*args)
		except FAILURES as ex: self.error(str(ex), at)

	def on_atom(self, prefix, name, at):
		return self._assemble(at, self.assembler.atom, prefix, name)

	def on_compound(self, connector, terms, at):
		return self._assemble(at, self.assembler.compound, connector, terms)

	def on_set(self, left, terms, right, at):
		return self._assemble(at, self.assembler.set, left, terms)

	def on_statement(self, copula, subject, predicate, at):
		return self._assemble(at, self.assembler.statement, copula, subject, predicate)

	def on_sentence(self, term, tail: Tail, at):
		where = tail.truth_at if tail.truth else tail.punctuation_at
		return self._assemble(where, self.assembler.sentence, term, tail.punctuation, tail.stamp, tail.truth)

	def on_task(self, head: Head, sentence, at):
		return self._assemble(at, self.assembler.task, head.budget, sentence)

def parse(text: str, profile: Profile) -> Union[Term, Sentence, Task]:
	""" Raises NarseseParseError if the text is not well-formed Narsese under the profile. """
	return NarseseParser(profile, text).parse()
