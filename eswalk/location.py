"""
Offsets are plain integers into the text of one source file.
Whatever prints error messages wants a line and column instead,
so a SourceFile does that translation on demand.
"""
from typing import NamedTuple, Optional
from boozetools.support.failureprone import SourceText

class Position(NamedTuple):
	""" Aimed at whatever prints error messages """
	filename: Optional[str]
	line: int
	column: int

	def __str__(self):
		return "%s:%d:%d" % (self.filename or "<unknown>", self.line, self.column)

class SourceFile:
	def __init__(self, name:Optional[str], text:str):
		self.name = name
		self._text = SourceText(text, filename=name)
		self._size = len(text)

	def __len__(self): return self._size

	def position(self, idx:int) -> Optional[Position]:
		if idx is None or not 0 <= idx <= self._size: return None
		row, col = self._text.find_row_col(idx)
		return Position(self.name, row, col)

	def line_of_text(self, row:int) -> str:
		return self._text.line_of_text(row)
