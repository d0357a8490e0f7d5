"""
The three canonical notations: ASCII, LaTeX-math, and Han.
Each is built on first use and shared thereafter.
"""
from functools import lru_cache
from .profile import (
	Profile, SpaceSyntax, AtomSyntax, CompoundSyntax, StatementSyntax, SentenceSyntax, TaskSyntax,
)

@lru_cache(maxsize=None)
def ascii_profile() -> Profile:
	return Profile(
		"ascii",
		space=SpaceSyntax(format_terms=" ", format_items=" "),
		atom=AtomSyntax({
			"word": "",
			"placeholder": "_",
			"variable_independent": "$",
			"variable_dependent": "#",
			"variable_query": "?",
			"interval": "+",
			"operator": "^",
		}),
		compound=CompoundSyntax(
			brackets=("(", ")"),
			separator=",",
			set_brackets={
				"set_extension": ("{", "}"),
				"set_intension": ("[", "]"),
			},
			connectors={
				"intersection_extension": "&",
				"intersection_intension": "|",
				"difference_extension": "-",
				"difference_intension": "~",
				"product": "*",
				"image_extension": "/",
				"image_intension": "\\",
				"conjunction": "&&",
				"disjunction": "||",
				"negation": "--",
				"conjunction_sequential": "&/",
				"conjunction_parallel": "&|",
			},
		),
		statement=StatementSyntax(
			brackets=("<", ">"),
			copulas={
				"inheritance": "-->",
				"similarity": "<->",
				"implication": "==>",
				"equivalence": "<=>",
				"instance": "{--",
				"property": "--]",
				"instance_property": "{-]",
				"implication_predictive": "=/>",
				"implication_concurrent": "=|>",
				"implication_retrospective": "=\\>",
				"equivalence_predictive": "</>",
				"equivalence_concurrent": "<|>",
				"equivalence_retrospective": "<\\>",
			},
		),
		sentence=SentenceSyntax(
			punctuations={"judgement": ".", "goal": "!", "question": "?", "quest": "@"},
			stamp_brackets=(":", ":"),
			stamps={"past": "\\", "present": "|", "future": "/", "fixed": "!"},
			truth_brackets=("%", "%"),
			truth_separator=";",
		),
		task=TaskSyntax(budget_brackets=("$", "$"), budget_separator=";"),
	)

@lru_cache(maxsize=None)
def latex_profile() -> Profile:
	# Command-form literals end in an empty argument "{}" so they need no trailing space.
	return Profile(
		"latex",
		space=SpaceSyntax(format_terms=" ", format_items=" "),
		atom=AtomSyntax({
			"word": "",
			"placeholder": r"\diamond{}",
			"variable_independent": r"\$",
			"variable_dependent": r"\#",
			"variable_query": "?",
			"interval": "+",
			"operator": r"\Uparrow{}",
		}),
		compound=CompoundSyntax(
			brackets=(r"\left(", r"\right)"),
			separator=r"\;",
			set_brackets={
				"set_extension": (r"\left\{", r"\right\}"),
				"set_intension": (r"\left[", r"\right]"),
			},
			connectors={
				"intersection_extension": r"\cap{}",
				"intersection_intension": r"\cup{}",
				"difference_extension": r"\minus{}",
				"difference_intension": r"\sim{}",
				"product": r"\times{}",
				"image_extension": "/",
				"image_intension": r"\backslash{}",
				"conjunction": r"\wedge{}",
				"disjunction": r"\vee{}",
				"negation": r"\neg{}",
				"conjunction_sequential": ",",
				"conjunction_parallel": ";",
			},
		),
		statement=StatementSyntax(
			brackets=(r"\left<", r"\right>"),
			copulas={
				"inheritance": r"\rightarrow{}",
				"similarity": r"\leftrightarrow{}",
				"implication": r"\Rightarrow{}",
				"equivalence": r"\Leftrightarrow{}",
				"instance": r"\circ\!\!\!\rightarrow{}",
				"property": r"\rightarrow\!\!\!\circ{}",
				"instance_property": r"\circ\!\!\!\rightarrow\!\!\!\circ{}",
				"implication_predictive": r"/\!\!\!\!\!\Rightarrow{}",
				"implication_concurrent": r"|\!\!\!\!\!\Rightarrow{}",
				"implication_retrospective": r"\backslash\!\!\!\!\!\Rightarrow{}",
				"equivalence_predictive": r"/\!\!\!\Leftrightarrow{}",
				"equivalence_concurrent": r"|\!\!\!\Leftrightarrow{}",
				"equivalence_retrospective": r"\backslash\!\!\!\Leftrightarrow{}",
			},
		),
		sentence=SentenceSyntax(
			punctuations={"judgement": ".", "goal": "!", "question": "?", "quest": "¿"},
			stamps={
				"past": r"\backslash\!\!\!\!\!\Rightarrow{}",
				"present": r"|\!\!\!\!\!\Rightarrow{}",
				"future": r"/\!\!\!\!\!\Rightarrow{}",
				"fixed": "t=",
			},
			truth_brackets=(r"\langle{}", r"\rangle{}"),
			truth_separator=",",
		),
		task=TaskSyntax(budget_brackets=(r"\$", r"\$"), budget_separator=";"),
	)

@lru_cache(maxsize=None)
def han_profile() -> Profile:
	return Profile(
		"han",
		space=SpaceSyntax(format_terms="", format_items=" "),
		atom=AtomSyntax({
			"word": "",
			"placeholder": "某",
			"variable_independent": "任一",
			"variable_dependent": "其一",
			"variable_query": "所问",
			"interval": "间隔",
			"operator": "操作",
		}),
		compound=CompoundSyntax(
			brackets=("（", "）"),
			separator="，",
			set_brackets={
				"set_extension": ("『", "』"),
				"set_intension": ("【", "】"),
			},
			connectors={
				"intersection_extension": "外交",
				"intersection_intension": "内交",
				"difference_extension": "外差",
				"difference_intension": "内差",
				"product": "积",
				"image_extension": "外像",
				"image_intension": "内像",
				"conjunction": "与",
				"disjunction": "或",
				"negation": "非",
				"conjunction_sequential": "接连",
				"conjunction_parallel": "同时",
			},
		),
		statement=StatementSyntax(
			brackets=("「", "」"),
			copulas={
				"inheritance": "是",
				"similarity": "似",
				"implication": "得",
				"equivalence": "同",
				"instance": "为",
				"property": "有",
				"instance_property": "具有",
				"implication_predictive": "将得",
				"implication_concurrent": "现得",
				"implication_retrospective": "曾得",
				"equivalence_predictive": "将同",
				"equivalence_concurrent": "现同",
				"equivalence_retrospective": "曾同",
			},
		),
		sentence=SentenceSyntax(
			punctuations={"judgement": "。", "goal": "！", "question": "？", "quest": "；"},
			stamps={"past": "过去", "present": "现在", "future": "将来", "fixed": "发生在"},
			truth_brackets=("真", "值"),
			truth_separator="、",
		),
		task=TaskSyntax(budget_brackets=("预", "算"), budget_separator="、"),
	)

PROFILES = {
	"ascii": ascii_profile,
	"latex": latex_profile,
	"han": han_profile,
}

def lookup(name: str) -> Profile:
	""" Find a canonical profile by (case-insensitive) name. """
	try: return PROFILES[name.lower()]()
	except KeyError:
		raise KeyError("No such profile %r; try one of %s" % (name, ", ".join(PROFILES))) from None
