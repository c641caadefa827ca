"""
A traversal-and-rewrite engine for ECMAScript syntax trees.

Build a Walker over a visitor (the DefaultVisitor, or something derived from it
such as the BlockNormalizer) and call begin(root).
"""
