"""
Everything the walker has to say about trouble goes through a Report.
Issues pile up as pictures: an introduction, some annotated source lines,
and maybe a footer. Nothing reaches the console until someone asks.
"""
import sys
import random
from traceback import format_exception
from typing import Any, Optional
from boozetools.support.failureprone import illustration

from .location import SourceFile, Position
from .ontology import Node

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm. ", "", ""]
	oaths = ['Drat', 'Rats', 'Fiddlesticks', 'Good Grief', 'Curses', 'Nuts', 'Crikey']
	resignations = [
		'The walk did not go as planned.',
		'Something in this tree is not what it claims to be.',
		'I lost my footing.',
		'Here is what I saw.',
	]
	return "%s%s! %s" % tuple(map(random.choice, (particle, oaths, resignations)))

class Report:
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues:Optional[int]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list["Pic"]: return list(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if self._max_issues and len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the loader's callers use:

	def no_such_file(self, path):
		self.issue(Pic("I see no file called %s" % path, []))

	def broken_file(self, path, why):
		intro = "Something went pear-shaped while trying to read %s" % path
		self.issue(Pic(intro, [], [str(why)]))

	# Methods the walker calls:

	def fault(self, kind:Optional[str], position:Optional[Position], ex:BaseException, source:SourceFile=None, idx:int=None):
		intro = "The walk broke down at %s." % (kind or "an unknown node")
		problem = []
		if source is not None and position is not None:
			problem.append(Annotation(source, idx, type(ex).__name__))
		footer = [
			"Position is %s" % position if position else "Unknown position!",
			"",
			*map(str.rstrip, format_exception(type(ex), ex, ex.__traceback__)),
		]
		self.issue(Pic(intro, problem, footer, position=position, exception=ex))

	def hook_failed(self, slot:str, node:Optional[Node], outcome:Any):
		intro = "A %s hook failed on %r: %s" % (slot, node, outcome)
		self.info(intro)
		self.issue(Pic(intro, []))

class Annotation:
	caption: str
	def __init__(self, source:SourceFile, idx:int, caption:str=""):
		self.source = source
		self.idx = idx
		self.caption = caption
	@property
	def path(self): return self.source.name
	def illustrate(self):
		pos = self.source.position(self.idx)
		row, col = pos.line, pos.column
		single_line = self.source.line_of_text(row)
		return illustration(single_line, col, 1, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=(), *, position:Position=None, exception:BaseException=None):
		self._intro, self._anns, self._footer = intro, anns, footer
		self.position = position
		self.exception = exception
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
