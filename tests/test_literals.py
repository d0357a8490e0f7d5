import unittest

from narsese import literals, lexical
from narsese.literals import WrongKind
from narsese.scanning import NarseseParseError
from narsese.terms import Word, Inheritance
from narsese.sentences import Judgement, Task, Budget, Truth

A, B = Word("A"), Word("B")

class LiteralTests(unittest.TestCase):

	def test_term(self):
		self.assertEqual(Inheritance(A, B), literals.term("<A --> B>"))
		self.assertEqual(literals.term("<A-->B>"), literals.term(" < A --> B > "))

	def test_sentence(self):
		self.assertEqual(Judgement(A, Truth(1.0, 0.9)), literals.sentence("A. %1.0;0.9%"))

	def test_task_promotes_a_sentence(self):
		self.assertEqual(Task(Judgement(A), Budget()), literals.task("A."))
		self.assertEqual(Task(Judgement(A), Budget(0.5)), literals.task("$0.5$ A."))

	def test_narsese_returns_whatever_it_finds(self):
		self.assertEqual(A, literals.narsese("A"))
		self.assertIsInstance(literals.narsese("A."), Judgement)
		self.assertIsInstance(literals.narsese("$$ A."), Task)

	def test_wrong_kind(self):
		for make, text in ((literals.term, "A."), (literals.sentence, "A"), (literals.sentence, "$$ A."), (literals.task, "A")):
			with self.subTest(make=make.__name__, text=text):
				with self.assertRaises(WrongKind) as cm:
					make(text)
				self.assertIsInstance(cm.exception, TypeError)

	def test_malformed(self):
		with self.assertRaises(NarseseParseError):
			literals.term("<A -->")

	def test_lexical_variants(self):
		self.assertEqual(lexical.Atom("_", "x"), literals.lexical_term("_x"))
		self.assertEqual(lexical.Sentence(lexical.Atom("", "A"), "?", "", ("1",)), literals.lexical_sentence("A? %1%"))
		self.assertEqual(lexical.Task((), lexical.Sentence(lexical.Atom("", "A"), ".")), literals.lexical_task("A."))
		with self.assertRaises(WrongKind):
			literals.lexical_term("A.")

if __name__ == '__main__':
	unittest.main()
