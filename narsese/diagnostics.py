import sys, random
from typing import Any
from boozetools.support.failureprone import SourceText, illustration

from .scanning import NarseseParseError
from .fold import FoldError
from .literals import WrongKind

class TooManyIssues(Exception):
	pass

def _lament():
	""" Something to say before the bad news. """
	openers = ["Hmm.", "Alas.", "Oops.", "Uh-oh.", ""]
	complaints = [
		"Not every line made sense.",
		"Some of this would not parse.",
		"The brackets and I disagree.",
		"A copula went missing somewhere.",
		"That was not Narsese as I know it.",
	]
	return " ".join(filter(None, (random.choice(openers), random.choice(complaints))))

class Report:
	""" Collects issues as a batch of translations goes by. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		_show(self._issues)

	# Methods the translator is likely to call:

	def parse_error(self, error:NarseseParseError, label:str):
		intro = "Could not read %s as Narsese." % label
		problem = [Annotation(error.text, error.offset, 1, error.message)]
		self.issue(Pic(intro, problem))

	def fold_error(self, error:FoldError, text:str, label:str):
		intro = "In %s: %s" % (label, error.message)
		spot = getattr(error.node, "spot", None)
		problem = [] if spot is None else [Annotation(text, spot, 1, "This part has no meaning in the source notation.")]
		self.issue(Pic(intro, problem))

	def wrong_kind(self, error:WrongKind, text:str, label:str):
		intro = "In %s: %s" % (label, error)
		self.issue(Pic(intro, [Annotation(text, 0, len(text.rstrip()), "")]))

class Annotation:
	""" Points at one spot in a piece of source text. """
	def __init__(self, text:str, offset:int, width:int=1, caption:str=""):
		self.source = SourceText(text)
		self.offset = offset
		self.width = width
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.offset)
		single_line = self.source.line_of_text(row)
		return illustration(single_line, col, self.width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		for ann in self._anns:
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _show(issues):
	if not issues: return
	print("%s (%d %s)" % (_lament(), len(issues), "issue" if len(issues) == 1 else "issues"), file=sys.stderr)
	for i in issues:
		print("", file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
