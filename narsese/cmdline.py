"""
This is a batch translator between notations of Narsese.

{0}

For example:

    narsese "<A --> B>. %1.0;0.9%"

will echo the sentence back in canonical ASCII form, or else try to explain why not.

    narsese -t han -f tasks.nal

will translate every line of tasks.nal into Han notation.

    narsese -t tree "<(*, A, B) --> R>?"

will show the structure of the question.

    narsese -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path
from boozetools.support.foundation import Visitor

TARGETS = ["ascii", "latex", "han", "typst", "tree"]

parser = argparse.ArgumentParser(
	prog="narsese",
	description="Batch translator between notations of Narsese.",
)
parser.add_argument("narsese", nargs="*", help='try "<A --> B>." for example.')
parser.add_argument('-f', "--file", help="Translate each non-blank line of this file.")
parser.add_argument('-s', "--source", default="ascii", choices=["ascii", "latex", "han"], help="Notation of the input. (Default: ascii)")
parser.add_argument('-t', "--target", default="ascii", choices=TARGETS, help="Notation of the output. (Default: ascii)")
parser.add_argument('-l', "--lexical", action="store_true", help="Read only the lexical structure; assign no meaning unless the target needs it.")
parser.add_argument('-k', "--kind", choices=["term", "sentence", "task"], help="Insist that every item be this kind of Narsese.")
parser.add_argument('-v', "--verbose", action="count", help="Mention each item as it goes by.")

class Outline(Visitor):
	""" An indented picture of the structure of a typed value. """
	def __init__(self):
		self.lines = []

	def _line(self, depth, text): self.lines.append("  "*depth + text)

	def visit_Atom(self, it, depth):
		self._line(depth, "%s %r" % (type(it).__name__, it.name))

	def visit_Placeholder(self, it, depth):
		self._line(depth, "Placeholder")

	def visit_Interval(self, it, depth):
		self._line(depth, "Interval %d" % it.interval)

	def visit_Term(self, it, depth):
		self._line(depth, type(it).__name__)
		for c in it.components(): self.visit(c, depth+1)

	def visit_Image(self, it, depth):
		self._line(depth, "%s, placeholder at %d" % (type(it).__name__, it.index))
		for c in it.components(): self.visit(c, depth+1)

	def visit_Sentence(self, it, depth):
		self._line(depth, "%s %r %r" % (type(it).__name__, it.stamp, it.truth))
		self.visit(it.term, depth+1)

	def visit_Task(self, it, depth):
		self._line(depth, "Task %r" % (it.budget,))
		self.visit(it.sentence, depth+1)

def outline(value) -> str:
	from .terms import Term, atoms_of
	pic = Outline()
	pic.visit(value, 0)
	term = value if isinstance(value, Term) else value.term
	pic.lines.append("atoms: " + ", ".join(map(str, atoms_of([term]))))
	return "\n".join(pic.lines)

class Translator:
	""" Translates one item at a time, reporting whatever goes wrong. """
	def __init__(self, args, report):
		from .profiles import lookup
		self.source = lookup(args.source)
		self.target = args.target
		self.lexical = args.lexical
		self.kind = args.kind
		self.report = report

	def _kinds(self):
		if self.lexical:
			from . import lexical
			return {"term": lexical.Term, "sentence": lexical.Sentence, "task": lexical.Task}
		from .terms import Term
		from .sentences import Sentence, Task
		return {"term": Term, "sentence": Sentence, "task": Task}

	def _read(self, text):
		if self.lexical:
			from .lexical_parser import parse_lexical
			return parse_lexical(text, self.source)
		from .parser import parse
		return parse(text, self.source)

	def _meaning(self, value):
		if not self.lexical: return value
		from .fold import fold
		return fold(value, self.source)

	def translate(self, text: str, label: str):
		from .scanning import NarseseParseError
		from .fold import FoldError
		from .literals import WrongKind
		try: value = self._read(text)
		except NarseseParseError as ex:
			self.report.parse_error(ex, label)
			return
		if self.kind and not isinstance(value, self._kinds()[self.kind]):
			self.report.wrong_kind(WrongKind(self.kind, value), text, label)
			return
		try: return self._write(value)
		except FoldError as ex:
			self.report.fold_error(ex, text, label)

	def _write(self, value) -> str:
		if self.target == "tree":
			return repr(value) if self.lexical else outline(value)
		if self.target == "typst":
			from .typst import TypstFormatter
			return TypstFormatter().format(self._meaning(value))
		from .profiles import lookup
		from .formatter import LexicalFormatter, NarseseFormatter
		profile = lookup(self.target)
		if self.lexical and profile is self.source:
			return LexicalFormatter(profile).format(value)
		return NarseseFormatter(profile).format(self._meaning(value))

def _items(args):
	for i, text in enumerate(args.narsese, 1):
		yield text, "argument %d" % i
	if args.file:
		path = Path(args.file)
		with open(path, "r", encoding="utf-8") as fh:
			for row, line in enumerate(fh, 1):
				if line.strip(): yield line.rstrip("\r\n"), "%s line %d" % (path.name, row)

def run(args):
	from .diagnostics import Report, TooManyIssues
	if not (args.narsese or args.file):
		parser.error("Give some Narsese to translate, or a file of it.")
	report = Report(verbose=args.verbose, max_issues=10)
	translator = Translator(args, report)
	try:
		for text, label in _items(args):
			report.info("Translating", label)
			result = translator.translate(text, label)
			if result is not None: print(result)
	except TooManyIssues:
		report.complain_to_console()
		print("Stopped early: that is as many issues as one run will report.", file=sys.stderr)
		return 1
	except OSError as ex:
		print("Could not read %s: %s" % (args.file, ex.strerror), file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
