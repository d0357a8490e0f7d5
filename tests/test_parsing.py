import unittest

from narsese import lexical
from narsese.profiles import ascii_profile, latex_profile, han_profile
from narsese.parser import parse
from narsese.lexical_parser import parse_lexical
from narsese.scanning import NarseseParseError
from narsese.terms import (
	Word, VariableIndependent, VariableDependent, VariableQuery, Interval, Operator, PLACEHOLDER,
	SetExtension, SetIntension, IntersectionExtension, IntersectionIntension,
	DifferenceExtension, DifferenceIntension, Product, ImageExtension, ImageIntension,
	Conjunction, Disjunction, Negation, ConjunctionSequential, ConjunctionParallel,
	Inheritance, Similarity, Implication, Equivalence,
	ImplicationPredictive, ImplicationConcurrent, ImplicationRetrospective,
	EquivalencePredictive, EquivalenceConcurrent,
)
from narsese.sentences import Judgement, Goal, Question, Quest, Task, Truth, Budget, Stamp, ETERNAL, PAST, PRESENT, FUTURE

A, B, C, R = Word("A"), Word("B"), Word("C"), Word("R")

S2 = "$0.5;0.75;0.4$ <(&/, <{ball} --> [left]>, <(*, {SELF}, $any, #some) --> ^do>) ==> <{SELF} --> [good]>>. :!-1: %1.0;0.9%"

def ascii(text): return parse(text, ascii_profile())

class AsciiGrammarTests(unittest.TestCase):
	""" Every fragment of the interchange notation. """

	def expect(self, cases):
		for text, value in cases:
			with self.subTest(text):
				self.assertEqual(value, ascii(text))

	def test_atoms(self):
		self.expect([
			("word", Word("word")),
			("$x", VariableIndependent("x")),
			("#y", VariableDependent("y")),
			("?z", VariableQuery("z")),
			("+137", Interval(137)),
			("^op", Operator("op")),
			("_", PLACEHOLDER),
		])

	def test_compounds(self):
		self.expect([
			("{a,b}", SetExtension(Word("a"), Word("b"))),
			("[a,b]", SetIntension(Word("a"), Word("b"))),
			("(&, A, B, C)", IntersectionExtension(A, B, C)),
			("(|, A, B)", IntersectionIntension(A, B)),
			("(-, A, B)", DifferenceExtension(A, B)),
			("(~, A, B)", DifferenceIntension(A, B)),
			("(*, A, B, C)", Product(A, B, C)),
			("(/, A, _, B)", ImageExtension(1, A, B)),
			("(\\, A, _, B)", ImageIntension(1, A, B)),
			("(&&, A, B)", Conjunction(A, B)),
			("(||, A, B)", Disjunction(A, B)),
			("(--, A)", Negation(A)),
			("(&/, A, B)", ConjunctionSequential(A, B)),
			("(&|, A, B)", ConjunctionParallel(A, B)),
		])

	def test_statements(self):
		self.expect([
			("<A --> B>", Inheritance(A, B)),
			("<A <-> B>", Similarity(A, B)),
			("<A ==> B>", Implication(A, B)),
			("<A <=> B>", Equivalence(A, B)),
			("<A {-- B>", Inheritance(SetExtension(A), B)),
			("<A --] B>", Inheritance(A, SetIntension(B))),
			("<A {-] B>", Inheritance(SetExtension(A), SetIntension(B))),
			("<A =/> B>", ImplicationPredictive(A, B)),
			("<A =|> B>", ImplicationConcurrent(A, B)),
			("<A =\\> B>", ImplicationRetrospective(A, B)),
			("<A </> B>", EquivalencePredictive(A, B)),
			("<A <|> B>", EquivalenceConcurrent(A, B)),
			("<A <\\> B>", EquivalencePredictive(B, A)),
		])

	def test_sentences(self):
		self.expect([
			("A.", Judgement(A)),
			("A!", Goal(A)),
			("A?", Question(A)),
			("A@", Quest(A)),
			("A. :\\:", Judgement(A, Truth(), PAST)),
			("A. :|:", Judgement(A, Truth(), PRESENT)),
			("A. :/:", Judgement(A, Truth(), FUTURE)),
			("A. :!137:", Judgement(A, Truth(), Stamp.fixed(137))),
			("A. %1.0;0.9%", Judgement(A, Truth(1.0, 0.9))),
			("A! %0.5%", Goal(A, Truth(0.5))),
			("$0.5;0.5;0.5$ A?", Task(Question(A), Budget(0.5, 0.5, 0.5))),
			("$$ A.", Task(Judgement(A), Budget())),
		])

	def test_whitespace_does_not_matter(self):
		self.assertEqual(ascii("<A-->B>.%1;0.9%"), ascii("  < A --> B > .  % 1 ; 0.9 %  "))

class ScenarioTests(unittest.TestCase):

	def test_s1(self):
		self.assertEqual(Judgement(Inheritance(A, B), Truth(), ETERNAL), ascii("<A --> B>."))

	def test_s2(self):
		task = ascii(S2)
		self.assertEqual(Budget(0.5, 0.75, 0.4), task.budget)
		self.assertEqual(Stamp.fixed(-1), task.stamp)
		self.assertEqual(Truth(1.0, 0.9), task.truth)
		self.assertIsInstance(task.sentence, Judgement)
		self.assertIsInstance(task.term, Implication)
		condition = task.term.subject
		self.assertIsInstance(condition, ConjunctionSequential)
		action = condition.components()[1]
		self.assertEqual(Operator("do"), action.predicate)
		self.assertEqual(Product(SetExtension(Word("SELF")), VariableIndependent("any"), VariableDependent("some")), action.subject)

	def test_s3(self):
		image = ascii("(/, R, _, B)")
		self.assertEqual(ImageExtension(1, R, B), image)
		self.assertEqual(1, image.index)
		self.assertEqual((R, B), image.components())

	def test_s4(self):
		self.assertEqual(
			Inheritance(Product(SetExtension(Word("SELF")), VariableIndependent("any")), Operator("op")),
			ascii("<(*, {SELF}, $any) --> ^op>"),
		)

	def test_s5(self):
		self.assertEqual(ascii("<{SELF} {-] good>."), parse("「『SELF』具有good」。", han_profile()))

	def test_s6(self):
		self.assertEqual(Question(VariableQuery("q-var")), ascii("?q-var?"))

class LexicalParserTests(unittest.TestCase):

	def test_longest_match(self):
		self.assertEqual(lexical.Compound("--", [lexical.Atom("", "A")]), parse_lexical("(--, A)", ascii_profile()))
		self.assertEqual(lexical.Compound("-", [lexical.Atom("", "A"), lexical.Atom("", "B")]), parse_lexical("(-, A, B)", ascii_profile()))

	def test_empty_prefix_atoms(self):
		atom = parse_lexical("word", ascii_profile())
		self.assertEqual(lexical.Atom("", "word"), atom)
		self.assertEqual("", atom.prefix)
		self.assertEqual("word", atom.name)

	def test_names_stop_at_copulas(self):
		expect = lexical.Statement("-->", lexical.Atom("", "A-b"), lexical.Atom("", "B"))
		self.assertEqual(expect, parse_lexical("<A-b-->B>", ascii_profile()))

	def test_raw_strings_survive(self):
		value = parse_lexical("$0.50;1;.3$ <A --> B>! :!+5: %1.%", ascii_profile())
		self.assertEqual(("0.50", "1", ".3"), value.budget)
		self.assertEqual(":!+5:", value.sentence.stamp)
		self.assertEqual(("1.",), value.sentence.truth)
		self.assertEqual("!", value.sentence.punctuation)

	def test_lexical_accepts_what_has_no_meaning(self):
		self.assertEqual(lexical.Atom("_", "x"), parse_lexical("_x", ascii_profile()))
		self.assertEqual(lexical.Compound("/", [lexical.Atom("", "A")]), parse_lexical("(/, A)", ascii_profile()))
		sentence = parse_lexical("A? %1.0;0.9%", ascii_profile())
		self.assertEqual(("1.0", "0.9"), sentence.truth)

	def test_budget_bracket_may_begin_a_variable(self):
		value = parse_lexical("$x.", ascii_profile())
		self.assertEqual(lexical.Sentence(lexical.Atom("$", "x"), "."), value)
		self.assertEqual(Judgement(VariableIndependent("x")), ascii("$x."))

	def test_no_punctuation_means_a_bare_term(self):
		self.assertEqual(lexical.Atom("$", "x"), parse_lexical("$x", ascii_profile()))

	def test_spots(self):
		value = parse_lexical("<A --> (*, B, C)>.", ascii_profile())
		self.assertEqual(0, value.spot)
		self.assertEqual(1, value.term.subject.spot)
		self.assertEqual(7, value.term.predicate.spot)
		self.assertEqual(14, value.term.predicate.terms[1].spot)

class OtherProfileTests(unittest.TestCase):

	def test_latex(self):
		text = r"\$0.5;0.5;0.5\$ \left<\left\{SELF\right\} \rightarrow{} \left(\times{}\; \$x\; \#y\right)\right>? |\!\!\!\!\!\Rightarrow{}"
		expect = Task(Question(Inheritance(SetExtension(Word("SELF")), Product(VariableIndependent("x"), VariableDependent("y"))), PRESENT), Budget(0.5, 0.5, 0.5))
		self.assertEqual(expect, parse(text, latex_profile()))

	def test_latex_stamp_and_copula_share_a_literal(self):
		text = r"\left<A |\!\!\!\!\!\Rightarrow{} B\right>. |\!\!\!\!\!\Rightarrow{} t=3"
		self.assertEqual(ImplicationConcurrent(A, B), parse(r"\left<A |\!\!\!\!\!\Rightarrow{} B\right>", latex_profile()))
		with self.assertRaises(NarseseParseError):
			parse(text, latex_profile())
		sentence = parse(r"\left<A |\!\!\!\!\!\Rightarrow{} B\right>. t=-3 \langle{}1.0,0.9\rangle{}", latex_profile())
		self.assertEqual(Judgement(ImplicationConcurrent(A, B), Truth(1.0, 0.9), Stamp.fixed(-3)), sentence)

	def test_han(self):
		text = "预0.5、0.5、0.5算「（积，任一甲，其一乙）是操作做」！将来 真1.0、0.9值"
		expect = Task(
			Goal(Inheritance(Product(VariableIndependent("甲"), VariableDependent("乙")), Operator("做")), Truth(1.0, 0.9), FUTURE),
			Budget(0.5, 0.5, 0.5),
		)
		self.assertEqual(expect, parse(text, han_profile()))

	def test_han_mixed_width_whitespace(self):
		self.assertEqual(Judgement(Similarity(A, B)), parse("「A　似 B」 。", han_profile()))

class ErrorTests(unittest.TestCase):

	def expect_error(self, cases, parse_it=ascii):
		for text, offset in cases:
			with self.subTest(text):
				with self.assertRaises(NarseseParseError) as cm:
					parse_it(text)
				self.assertEqual(offset, cm.exception.offset)
				self.assertEqual(text[max(0, offset-4):offset+5], cm.exception.context)

	def test_syntax_errors(self):
		self.expect_error([
			("", 0),
			("A..", 1),
			("<A --> B", 8),
			("{A, B]", 5),
			("(&& A, B)", 4),
			("(^op, x)", 1),
			("(*, )", 4),
			("{}", 1),
			("<A B>", 4),
			("A. %1.5;0.9%", 3),
			("A. %1;0.9;0.5%", 3),
			("$0.5;0.5;0.5;0.5$ A.", 0),
			("A. :!1-2:", 5),
			("+ ", 1),
		])

	def test_meaning_errors(self):
		self.expect_error([
			("+x", 0),
			("_x", 0),
			("(/, A, B)", 0),
			("(/, _, A, _)", 0),
			("(--, A, B)", 0),
			("(-, A)", 0),
			("A? %1.0;0.9%", 3),
		])

	def test_numeric_slots_hold_only_numbers(self):
		cases = [("$0.5;0.5;x$ A.", 0), ("$x$ A.", 0), ("A. %1.0;x%", 3), ("A! :|: %q%", 7)]
		self.expect_error(cases)
		for text, offset in cases:
			with self.subTest(text):
				with self.assertRaises(NarseseParseError) as cm:
					ascii(text)
				self.assertIn("is not a decimal number", cm.exception.message)

	def test_budget_bracket_without_a_partner_begins_an_atom(self):
		self.assertEqual(Judgement(VariableIndependent("x"), Truth(1.0, 0.9)), ascii("$x. %1.0;0.9%"))

	def test_bracketed_words_need_punctuation_to_be_numbers(self):
		han = han_profile()
		self.assertEqual(Word("真2值"), parse("真2值", han))
		self.assertEqual(Word("预x算y"), parse("预x算y", han))
		self.assertEqual(lexical.Atom("", "真2值"), parse_lexical("真2值", han))
		with self.assertRaises(NarseseParseError) as cm:
			parse("A。 真2值", han)
		self.assertIn("outside [0, 1]", cm.exception.message)

	def test_offsets_survive_whitespace(self):
		with self.assertRaises(NarseseParseError) as cm:
			ascii("<A -->   (^op, x)>")
		self.assertEqual(10, cm.exception.offset)

	def test_error_is_a_parse_error(self):
		from boozetools.parsing.interface import ParseError
		self.assertTrue(issubclass(NarseseParseError, ParseError))

if __name__ == '__main__':
	unittest.main()
