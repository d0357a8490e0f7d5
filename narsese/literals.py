"""
Narsese literals in Python source, written in ASCII notation:

	>>> term("<A --> B>")
	Inheritance(Word('A'), Word('B'))

A malformed literal raises NarseseParseError; one of the wrong kind raises WrongKind.
"""
from .profiles import ascii_profile
from .parser import parse
from .lexical_parser import parse_lexical
from .terms import Term
from .sentences import Sentence, Task
from . import lexical

class WrongKind(TypeError):
	def __init__(self, wanted: str, got):
		super().__init__(wanted, got)
		self.wanted, self.got = wanted, got
	def __str__(self): return "Expected a %s, but got %r." % (self.wanted, self.got)

def narsese(text: str):
	""" Whatever the text denotes: a term, a sentence, or a task. """
	return parse(text, ascii_profile())

def _expect(value, kind: type, wanted: str):
	if not isinstance(value, kind): raise WrongKind(wanted, value)
	return value

def term(text: str) -> Term: return _expect(narsese(text), Term, "term")
def sentence(text: str) -> Sentence: return _expect(narsese(text), Sentence, "sentence")

def task(text: str) -> Task:
	""" A bare sentence is promoted to a task with the empty budget. """
	value = narsese(text)
	if isinstance(value, Sentence): return Task.from_sentence(value)
	return _expect(value, Task, "task")

def lexical_narsese(text: str):
	return parse_lexical(text, ascii_profile())

def lexical_term(text: str) -> lexical.Term: return _expect(lexical_narsese(text), lexical.Term, "term")
def lexical_sentence(text: str) -> lexical.Sentence: return _expect(lexical_narsese(text), lexical.Sentence, "sentence")

def lexical_task(text: str) -> lexical.Task:
	value = lexical_narsese(text)
	if isinstance(value, lexical.Sentence): return lexical.Task((), value)
	return _expect(value, lexical.Task, "task")
