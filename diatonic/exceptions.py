"""Errors raised by the diatonic package.

All of them derive from :class:`DiatonicError`, and each also derives from the
built-in exception a caller would naturally catch (``ValueError`` for bad
names, ``TypeError`` for bad constructor arguments).
"""


class DiatonicError (Exception):
	pass


class InvalidPitchClassName (DiatonicError, ValueError):

	"""
	Raised when a string does not name a pitch class (or a spelled pitch).
	"""


class InvalidConstructionArgument (DiatonicError, TypeError):

	"""
	Raised when a Pitch or Accidental is built from values of the wrong type.
	"""
