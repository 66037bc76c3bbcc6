"""Pitch classes and accidentals - the spelling algebra.

A *spelling* names one of the twelve chromatic pitch classes in a particular
way: a natural letter (``PitchClass``) optionally wrapped in any number of
``Sharp`` / ``Flat`` layers (``Accidental``). ``C``, ``B♯`` and ``D♭♭`` all
sound as pitch class 0 but are three different spellings.

Every spelling exposes the same interface:

- ``rank``: semitone position, *not* reduced mod 12 (``B♯`` is 12, ``C♭`` is -1).
- ``natural_rank``: rank of the underlying letter (``B♯`` → 11).
- ``kernel``: the underlying natural ``PitchClass``.
- ``acc_i``: net number of accidentals (``+2`` for a double sharp).
- ``sharp`` / ``flat`` / ``acc(n)``: add accidentals. A sharp and a flat
  cancel one level at a time, so ``x.acc(n).acc(-n) == x``.
- ``x + n`` / ``x - n``: chromatic transposition by ``n`` semitones.

Spellings are ordered by ``(rank, natural_rank)``, so enharmonics sort next to
each other but never compare equal::

    c = PitchClass.from_string("C")
    d = PitchClass.from_string("D")
    c.sharp < d.flat                 # True - same rank, C is the lower letter
    c == d.flat.flat                 # False - enharmonic, different spelling
    PitchClass.from_integer(1)       # → C♯ (canonical sharp spelling)
"""

import dataclasses
import typing

import diatonic.conversions
import diatonic.exceptions


NATURAL_NAMES: typing.Tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")

NATURAL_RANKS: typing.Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Natural letter for each residue mod 12; None where the canonical spelling is a sharp.
PC_NAMES: typing.List[typing.Optional[str]] = [
	"C", None, "D", None, "E", "F", None, "G", None, "A", None, "B",
]

NOTATION_STYLES: typing.Tuple[str, ...] = ("unicode", "ascii")

SHARP_GLYPHS: typing.Dict[str, str] = {"unicode": "♯", "ascii": "#"}
FLAT_GLYPHS: typing.Dict[str, str] = {"unicode": "♭", "ascii": "b"}


def check_style (style: str) -> str:

	"""Return ``style`` if it is a known notation style, else raise ``ValueError``."""

	if style not in NOTATION_STYLES:
		raise ValueError(f"Unknown notation style {style!r}. Available: {list(NOTATION_STYLES)}")

	return style


class Spelling:

	"""
	Behaviour shared by ``PitchClass`` and ``Accidental``.

	Subclasses provide ``rank``, ``natural_rank`` and ``kernel``.
	"""

	rank: int
	natural_rank: int
	kernel: "PitchClass"


	@property
	def acc_i (self) -> int:

		"""Net accidental count: positive for sharps, negative for flats."""

		return self.rank - self.natural_rank


	@property
	def kind (self) -> str:

		"""``"natural"``, ``"sharp"`` or ``"flat"`` depending on the sign of ``acc_i``."""

		if self.acc_i > 0:
			return "sharp"
		if self.acc_i < 0:
			return "flat"
		return "natural"


	@property
	def letter (self) -> str:
		return self.kernel.name


	@property
	def sharp (self) -> "Spelling":

		"""This spelling raised by one accidental."""

		return Sharp(self)


	@property
	def flat (self) -> "Spelling":

		"""This spelling lowered by one accidental."""

		return Flat(self)


	def acc (self, n: int) -> "Spelling":

		"""
		Apply ``n`` accidentals: sharps when positive, flats when negative.

		Sharps and flats cancel one level at a time, so the depth of the result
		is the net imbalance, not the number of steps taken.

		Example:
			```python
			c = PitchClass.from_string("C")
			c.acc(2)          # → C♯♯
			c.acc(2).acc(-3)  # → C♭
			```
		"""

		result: Spelling = self

		while n > 0:
			result = result.sharp
			n -= 1

		while n < 0:
			result = result.flat
			n += 1

		return result


	def __add__ (self, n: int) -> "Spelling":

		"""
		Transpose chromatically by ``n`` semitones.

		Every spelling lands on the canonical spelling of the new pitch class:
		``C + 1`` → ``C♯``, ``C♯ + 1`` → ``D``, ``B♯ + 1`` → ``C♯``. Accidentals
		are not preserved, so ``C♭ + 12`` is ``B``; use ``acc`` to respell.
		"""

		if not isinstance(n, int):
			return NotImplemented

		return PitchClass.from_integer(self.rank + n)


	def __sub__ (self, n: int) -> "Spelling":

		if not isinstance(n, int):
			return NotImplemented

		return self + -n


	def hz (self, octave: int = 4) -> float:

		"""Frequency of this spelling in ``octave`` (scientific pitch notation)."""

		return diatonic.conversions.mtof(self.rank + (octave + 1) * 12)


	def text (self, style: str = "unicode") -> str:

		"""Render as the letter followed by accidental glyphs (``"C♯♯"`` or ``"C##"``)."""

		check_style(style)
		glyph = SHARP_GLYPHS[style] if self.acc_i > 0 else FLAT_GLYPHS[style]

		return self.letter + glyph * abs(self.acc_i)


	def _key (self) -> typing.Tuple[int, int]:
		return (self.rank, self.natural_rank)


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Spelling):
			return NotImplemented

		return self._key() == other._key()


	def __lt__ (self, other: "Spelling") -> bool:

		if not isinstance(other, Spelling):
			return NotImplemented

		return self._key() < other._key()


	def __le__ (self, other: "Spelling") -> bool:

		if not isinstance(other, Spelling):
			return NotImplemented

		return self._key() <= other._key()


	def __gt__ (self, other: "Spelling") -> bool:

		if not isinstance(other, Spelling):
			return NotImplemented

		return self._key() > other._key()


	def __ge__ (self, other: "Spelling") -> bool:

		if not isinstance(other, Spelling):
			return NotImplemented

		return self._key() >= other._key()


	def __hash__ (self) -> int:

		# kind keeps a natural apart from any wrapper with the same key.
		return hash((self.kind, self.rank, self.natural_rank))


	def __int__ (self) -> int:
		return self.rank


	def __str__ (self) -> str:
		return self.text()


	def __repr__ (self) -> str:
		return f"{type(self).__name__}({self.text('ascii')})"


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class PitchClass (Spelling):

	"""
	One of the seven natural pitch classes C, D, E, F, G, A, B.
	"""

	name: str
	rank: int


	def __post_init__ (self) -> None:

		if self.name not in NATURAL_NAMES or NATURAL_RANKS[NATURAL_NAMES.index(self.name)] != self.rank:
			raise diatonic.exceptions.InvalidPitchClassName(
				f"No natural pitch class {self.name!r} with rank {self.rank!r}"
			)


	@property
	def natural_rank (self) -> int:  # type: ignore[override]
		return self.rank


	@property
	def kernel (self) -> "PitchClass":  # type: ignore[override]
		return self


	@classmethod
	def from_integer (cls, i: int) -> Spelling:

		"""
		Return the canonical spelling of pitch class ``i mod 12``.

		Residues without a natural letter are spelled as the sharp of the
		natural below (1 → C♯, 6 → F♯), never as a flat.

		Example:
			```python
			PitchClass.from_integer(0)   # → C
			PitchClass.from_integer(61)  # → C♯
			PitchClass.from_integer(-1)  # → B
			```
		"""

		residue = i % 12
		name = PC_NAMES[residue]

		if name is None:
			return cls.from_integer(residue - 1).sharp

		return cls(name, residue)


	from_midi = from_integer


	@classmethod
	def from_string (cls, s: str) -> "PitchClass":

		"""
		Look up a natural pitch class by letter, case-insensitively.

		Raises:
			InvalidPitchClassName: If ``s`` is not one of A-G.
		"""

		if not isinstance(s, str) or s.upper() not in NATURAL_NAMES:
			raise diatonic.exceptions.InvalidPitchClassName(
				f"Unknown pitch class name: {s!r}. Expected one of {', '.join(NATURAL_NAMES)}."
			)

		name = s.upper()
		return cls(name, NATURAL_RANKS[NATURAL_NAMES.index(name)])


	@classmethod
	def from_hz (cls, hz: float) -> Spelling:

		"""Canonical spelling of the pitch class nearest to ``hz``."""

		return cls.from_integer(diatonic.conversions.ftom(hz))


NATURALS: typing.Tuple[PitchClass, ...] = tuple(
	PitchClass(name, rank) for name, rank in zip(NATURAL_NAMES, NATURAL_RANKS)
)


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class Accidental (Spelling):

	"""
	A sharp or flat applied to another spelling.

	``rank``, ``natural_rank`` and ``kernel`` are resolved once at construction,
	so arbitrarily deep chains stay cheap to compare and hash.
	"""

	wrapped: Spelling
	rank: int = dataclasses.field(init=False)
	kernel: PitchClass = dataclasses.field(init=False)

	direction: typing.ClassVar[int] = 0


	def __post_init__ (self) -> None:

		if not isinstance(self.wrapped, Spelling):
			raise diatonic.exceptions.InvalidConstructionArgument(
				f"{type(self).__name__} expects a PitchClass or Accidental, got {self.wrapped!r}"
			)

		object.__setattr__(self, "rank", self.wrapped.rank + self.direction)
		object.__setattr__(self, "kernel", self.wrapped.kernel)


	@property
	def natural_rank (self) -> int:  # type: ignore[override]
		return self.kernel.rank


class Sharp (Accidental):

	"""Raises the wrapped spelling by a semitone."""

	direction = 1


	@property
	def flat (self) -> Spelling:
		return self.wrapped


class Flat (Accidental):

	"""Lowers the wrapped spelling by a semitone."""

	direction = -1


	@property
	def sharp (self) -> Spelling:
		return self.wrapped
