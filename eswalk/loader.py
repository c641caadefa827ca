"""
The parser lives elsewhere. What it hands over, when it does so across a process
boundary, is a JSON document: each node is an object whose "kind" names one of
the classes in the syntax module, and whose other keys are its constructor's arguments.

The program object may also carry "source", its original text,
so that offsets can be turned into lines and columns.
A property's own kind (value, get or set) travels as "property_kind".
"""
import json
from pathlib import Path
from typing import Any, Optional
from . import syntax
from .location import SourceFile
from .ontology import Node

class TreeFormatError(Exception):
	pass

_CLASSES = {cls.__name__: cls for cls in syntax.NODE_KINDS | syntax.HELPER_KINDS}

def load_tree(path:Path) -> Node:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			data = json.load(fh)
	except json.JSONDecodeError as ex:
		raise TreeFormatError("%s is not JSON: %s" % (path, ex)) from ex
	except UnicodeDecodeError as ex:
		raise TreeFormatError("%s is not UTF-8: %s" % (path, ex)) from ex
	return build_tree(data, filename=str(path))

def build_tree(data:Any, filename:Optional[str]=None) -> Any:
	if isinstance(data, list):
		return [build_tree(x, filename) for x in data]
	if not isinstance(data, dict):
		return data
	if "kind" not in data:
		raise TreeFormatError("Object without a kind: %r" % sorted(data))
	kind = data["kind"]
	if kind not in _CLASSES:
		raise TreeFormatError("No such kind of node: %r" % kind)
	cls = _CLASSES[kind]
	fields = {k: build_tree(v, filename) for k, v in data.items() if k != "kind"}
	if cls is syntax.Property and "property_kind" in fields:
		fields["kind"] = fields.pop("property_kind")
	if cls is syntax.Program:
		name = fields.pop("filename", filename)
		text = fields.pop("source", None)
		if text is not None:
			fields["file"] = SourceFile(name, text)
	try:
		return cls(**fields)
	except (TypeError, AssertionError) as ex:
		raise TreeFormatError("Bad fields for %s: %s" % (kind, ex)) from ex
