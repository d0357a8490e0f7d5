import unittest

from narsese import profiles
from narsese.profile import (
	Profile, ProfileError, SpaceSyntax, AtomSyntax, CompoundSyntax,
	CONNECTOR_ROLES, COPULA_ROLES, ATOM_ROLES,
)

def _variant(base: Profile, **changes) -> Profile:
	parts = dict(space=base.space, atom=base.atom, compound=base.compound, statement=base.statement, sentence=base.sentence, task=base.task)
	parts.update(changes)
	return Profile("variant", **parts)

class CanonicalProfileTests(unittest.TestCase):

	def test_profiles_are_built_once(self):
		self.assertIs(profiles.ascii_profile(), profiles.ascii_profile())
		self.assertIs(profiles.latex_profile(), profiles.lookup("LaTeX"))
		self.assertIs(profiles.han_profile(), profiles.lookup("han"))

	def test_unknown_profile(self):
		with self.assertRaises(KeyError):
			profiles.lookup("klingon")

	def test_every_role_has_a_literal(self):
		for name in profiles.PROFILES:
			with self.subTest(name):
				p = profiles.lookup(name)
				self.assertEqual(set(ATOM_ROLES), set(p.atom.prefixes.literal))
				self.assertEqual(set(CONNECTOR_ROLES), set(p.compound.connectors.literal))
				self.assertEqual(set(COPULA_ROLES), set(p.statement.copulas.literal))
				self.assertEqual("", p.atom.prefixes.literal["word"])

	def test_ascii_literals(self):
		p = profiles.ascii_profile()
		self.assertEqual("-->", p.statement.copulas.literal["inheritance"])
		self.assertEqual("inheritance", p.statement.copulas.role["-->"])
		self.assertEqual(":|:", p.sentence.stamps.literal["present"])
		self.assertEqual((":!", ":"), tuple(p.sentence.fixed_stamp))
		self.assertEqual("set_intension", p.compound.set_role["["])

	def test_role_tables_must_be_complete(self):
		prefixes = dict(profiles.ascii_profile().atom.prefixes.literal)
		del prefixes["operator"]
		with self.assertRaises(ProfileError):
			AtomSyntax(prefixes)

	def test_one_literal_one_role(self):
		prefixes = dict(profiles.ascii_profile().atom.prefixes.literal, operator="$")
		with self.assertRaises(ProfileError):
			AtomSyntax(prefixes)

class ProfileInvariantTests(unittest.TestCase):

	def test_word_prefix_must_be_empty(self):
		ascii = profiles.ascii_profile()
		prefixes = dict(ascii.atom.prefixes.literal, word="w")
		with self.assertRaises(ProfileError):
			_variant(ascii, atom=AtomSyntax(prefixes))

	def test_connectors_are_not_structure(self):
		ascii = profiles.ascii_profile()
		connectors = dict(ascii.compound.connectors.literal, product=",")
		compound = CompoundSyntax(("(", ")"), ",", ascii.compound.set_literal, connectors)
		with self.assertRaises(ProfileError):
			_variant(ascii, compound=compound)

	def test_significant_space_needs_clean_delimiters(self):
		# Han prefixes and connectors are made of identifier characters.
		with self.assertRaises(ProfileError):
			_variant(profiles.han_profile(), space=SpaceSyntax(strip=False))

	def test_latex_survives_significant_space(self):
		tight = _variant(profiles.latex_profile(), space=SpaceSyntax(strip=False))
		self.assertFalse(tight.space.strip)

	def test_terminators(self):
		p = profiles.ascii_profile()
		for literal in ("-->", ",", ")", ">", "}", "]"):
			with self.subTest(literal):
				self.assertIn(literal, p.terminators)
		self.assertNotIn("-", p.terminators)

if __name__ == '__main__':
	unittest.main()
