"""
Walk a syntax tree, and maybe normalize it, from the command line.

{0}

For example:

    eswalk tree.json --trace

prints every node of the tree in the order the walker visits it.

    eswalk -h

will explain all the arguments.

The tree is a JSON document as some parser emits it; see eswalk.loader for the format.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="eswalk",
	description="Traverse, inspect, and block-normalize ECMAScript syntax trees.",
)
parser.add_argument("tree", help="a JSON syntax tree, as a parser emits it.")
parser.add_argument('-n', "--normalize", action="store_true", help="Rewrite every control-flow body into an explicit block.")
parser.add_argument('-t', "--trace", action="store_true", help="Print each node's kind in the order visited.")
parser.add_argument('-s', "--scopes", action="store_true", help="Print the names declared in each scope.")
parser.add_argument('-k', "--catch", action="store_true", help="Report a fault in the walk instead of crashing.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")

def run(args):
	from .diagnostics import Report
	from .hooks import Breadcrumbs, ScopeCensus
	from .loader import load_tree, TreeFormatError
	from .rewriter import BlockNormalizer
	from .walker import Walker
	report = Report(verbose=args.verbose)
	path = Path.cwd() / args.tree
	report.info("Loading", path)
	try: root = load_tree(path)
	except FileNotFoundError: report.no_such_file(path)
	except (OSError, TreeFormatError) as ex: report.broken_file(path, ex)
	if report.sick():
		report.complain_to_console()
		return 1

	visitor = BlockNormalizer(normalize_all=args.normalize)
	crumbs, census = Breadcrumbs(), ScopeCensus()
	if args.trace: visitor.add_hook(crumbs)
	if args.scopes: visitor.add_hook(census)
	walker = Walker(visitor, report, catch_faults=args.catch)
	walker.begin(root)
	if report.sick():
		report.complain_to_console()
		return 1

	if args.trace:
		print(crumbs.render())
	for md in census.frames:
		print("%s %s" % (md.node.kind(), _where(walker, md.node.idx0())))
		for name, idx in md.scope.items():
			print("    %s %s" % (name, _where(walker, idx)))
	return 0

def _where(walker, idx):
	return walker.position(idx) or "@%d" % idx

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
