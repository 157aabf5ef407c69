"""
These most-fundamental classes in the syntax class hierarchy
are separate from the rest so that the run-time and the diagnostics
can talk about phrases without dragging in every concrete node type.
"""

class Phrase:
	""" Anything a parser would build. The line number is zero when nobody knows better. """
	line: int = 0
	def where(self) -> str: return "[line %d]" % self.line

class ValueExpression(Phrase): pass

class Statement(Phrase): pass

SCRIPT = "<script>"  # What the top level is called in a stack trace.
