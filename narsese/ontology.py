"""
The most fundamental classifications, shared by the lexical tree and the typed AST.
They live apart from both to avoid circular imports.
"""
from enum import Enum

class Category(Enum):
	ATOM = "atom"
	COMPOUND = "compound"
	STATEMENT = "statement"

class Capacity(Enum):
	"""
	How many components a kind of term holds, and whether their order matters.
	The base number orders the capacities from leaf-like to collection-like.
	"""
	ATOM = ("atom", 1)
	UNARY = ("unary", 1)
	BINARY_VEC = ("binary_vec", 2)
	BINARY_SET = ("binary_set", 2)
	VEC = ("vec", 3)
	SET = ("set", 3)

	@property
	def base_num(self) -> int: return self.value[1]
	@property
	def is_binary(self) -> bool: return self in (Capacity.BINARY_VEC, Capacity.BINARY_SET)
	@property
	def is_multi(self) -> bool: return self in (Capacity.VEC, Capacity.SET)
	@property
	def is_unordered(self) -> bool: return self in (Capacity.BINARY_SET, Capacity.SET)

class ValueObject:
	"""
	Equality and hashing by kind and key, so values can be set members.
	Subclasses call __init__ with whatever identifies them.
	"""
	_key: tuple
	_hash: int
	def __init__(self, *key):
		self._key = key
		self._hash = hash((type(self).__name__, key))
	def __hash__(self): return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def __ne__(self, other): return not self == other
