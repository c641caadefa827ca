"""
Name-spaces of the simplest sort: a program or function body maps each
declared name to the offset of its declaration. Blocks do not get one.

Lookup starts at the innermost frame of an ancestor stack and works outward.
"""
from typing import Iterable, Iterator, Optional, TYPE_CHECKING
from .ontology import Declaration
from .syntax import VariableDeclaration

if TYPE_CHECKING:
	from .stacking import Metadata, STACK

class Variables:
	"""
	Lightly enhanced dictionary. Unlike most name-spaces, it does not mind
	duplicate keys: `var x` twice in one function is fine, and the later wins.
	"""
	_locate: dict[str, int]

	def __init__(self):
		self._locate = {}

	def __contains__(self, name: str) -> bool:
		return name in self._locate

	def __iter__(self) -> Iterator[str]:
		return iter(self._locate)

	def __len__(self): return len(self._locate)

	def declare(self, name: str, idx: int):
		self._locate[name] = idx

	def locate(self, name: str) -> Optional[int]:
		return self._locate.get(name)

	def items(self):
		return self._locate.items()

def collect_scope(md:"Metadata", declarations:Iterable[Declaration]) -> Variables:
	if md.scope is None: md.scope = Variables()
	for d in declarations:
		if isinstance(d, VariableDeclaration):
			for v in d.variables:
				md.scope.declare(v.name, v.idx)
	return md.scope

def find_variable(stack:"STACK", name:str) -> Optional[int]:
	""" Offset of the innermost declaration of name in scope, or None if there is none. """
	for md in reversed(stack):
		if md.scope is not None and name in md.scope:
			return md.scope.locate(name)
	return None
