"""
Typst math output, for typesetting typed Narsese.

This is write-only: there is no profile, and nothing parses it back.
Every non-empty piece carries its own surrounding spaces; a final pass
trims the result and collapses each whitespace run to a single space.
"""
import re
from boozetools.support.foundation import Visitor
from . import terms, sentences

PREFIXES = {
	"word": "",
	"placeholder": " diamond.small ",
	"variable_independent": r" \$ #h(-0.05em) ",
	"variable_dependent": r" \# #h(-0.05em) ",
	"variable_query": " ? #h(-0.05em) ",
	"interval": " + #h(-0.05em) ",
	"operator": " arrow.t.double #h(-0.05em) ",
}

BRACKETS_COMPOUND = (" lr(( ", " )) ")
BRACKETS_SET = {
	"set_extension": (" lr({ ", " }) "),
	"set_intension": (" lr([ ", " ]) "),
}
BRACKETS_STATEMENT = (" lr(angle.l ", " angle.r) ")
BRACKETS_TRUTH = (" lr(angle.l ", " angle.r) ")
BRACKETS_BUDGET = (r" lr(\$ ", r" \$) ")

SEPARATOR_COMPOUND = " space "
SEPARATOR_ITEM = " space "
SEPARATOR_TRUTH = ","
SEPARATOR_BUDGET = '";"'  # A bare semicolon inside lr(\$ ... \$) upsets Typst.

CONNECTORS = {
	"intersection_extension": " sect ",
	"intersection_intension": " union ",
	"difference_extension": " minus ",
	"difference_intension": " minus.circle ",
	"product": " times ",
	"image_extension": r" \/ ",
	"image_intension": r" \\ ",
	"conjunction": " and ",
	"disjunction": " or ",
	"negation": " not ",
	"conjunction_sequential": " , ",
	"conjunction_parallel": " ; ",
}

COPULAS = {
	"inheritance": " arrow.r ",
	"similarity": " arrow.l.r ",
	"implication": " arrow.r.double ",
	"equivalence": " arrow.l.r.double ",
	"implication_predictive": r" space\/#h(-0.6em)arrow.r.double ",
	"implication_concurrent": r" space\|#h(-0.6em)arrow.r.double ",
	"implication_retrospective": r" space\\#h(-0.6em)arrow.r.double ",
	"equivalence_predictive": r" space\/#h(-0.6em)arrow.l.r.double ",
	"equivalence_concurrent": r" space\|#h(-0.6em)arrow.l.r.double ",
}

STAMPS = {
	"eternal": "",
	"past": r" \/#h(-0.6em)arrow.r.double ",
	"present": r" \|#h(-0.6em)arrow.r.double ",
	"future": r" \\#h(-0.6em)arrow.r.double ",
	"fixed": " t= ",
}

PUNCTUATIONS = {
	"judgement": " . ",
	"goal": " ! ",
	"question": " ? ",
	"quest": " quest.inv ",
}

_WHITESPACE = re.compile(r"\s+")

def collapse_whitespace(text: str) -> str:
	return _WHITESPACE.sub(" ", text.strip())

def quote(name: str) -> str:
	return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'

def number(value: float) -> str:
	text = repr(float(value))
	return text[:-2] if text.endswith(".0") else text

class TypstFormatter(Visitor):
	def format(self, value) -> str:
		return collapse_whitespace(self.visit(value))

	def _floats(self, brackets, separator, values) -> str:
		return brackets[0] + separator.join(map(number, values)) + brackets[1]

	def visit_Atom(self, it: terms.Atom):
		return PREFIXES[it.role] + quote(it.name)

	def visit_Placeholder(self, it: terms.Placeholder):
		return PREFIXES[it.role]

	def _compound(self, connector: str, components) -> str:
		parts = [self.visit(c) for c in components]
		left, right = BRACKETS_COMPOUND
		if len(parts) == 2: return left + connector.join(parts) + right
		return left + connector + SEPARATOR_COMPOUND + SEPARATOR_COMPOUND.join(parts) + right

	def visit_Compound(self, it: terms.Compound):
		return self._compound(CONNECTORS[it.role], it.components())

	def visit_Image(self, it: terms.Image):
		return self._compound(CONNECTORS[it.role], it.with_placeholder())

	def visit_SetCompound(self, it: terms.SetCompound):
		if it.role not in BRACKETS_SET: return self.visit_Compound(it)
		left, right = BRACKETS_SET[it.role]
		return left + SEPARATOR_COMPOUND.join(self.visit(c) for c in it.components()) + right

	def visit_Statement(self, it: terms.Statement):
		left, right = BRACKETS_STATEMENT
		return left + self.visit(it.subject) + COPULAS[it.role] + self.visit(it.predicate) + right

	def stamp(self, stamp: sentences.Stamp) -> str:
		if stamp.is_fixed(): return STAMPS["fixed"] + str(stamp.time)
		return STAMPS[stamp.kind]

	def truth(self, truth) -> str:
		if not truth: return ""
		return self._floats(BRACKETS_TRUTH, SEPARATOR_TRUTH, truth)

	def visit_Sentence(self, it: sentences.Sentence):
		return self.visit(it.term) + PUNCTUATIONS[it.punctuation] + self.stamp(it.stamp) + SEPARATOR_ITEM + self.truth(it.truth)

	def visit_Task(self, it: sentences.Task):
		return SEPARATOR_ITEM.join((
			self._floats(BRACKETS_BUDGET, SEPARATOR_BUDGET, it.budget),
			self.visit(it.term) + PUNCTUATIONS[it.punctuation],
			self.stamp(it.stamp),
			self.truth(it.truth),
		))
