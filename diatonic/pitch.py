"""Absolute pitches: a spelling plus an octave.

Octaves follow scientific pitch notation with MIDI 60 = C4 and MIDI 0 = C-1.
A pitch's MIDI number is ``spelling.rank + (octave + 1) * 12`` using the
unreduced rank, so ``B♯3`` and ``C4`` are both MIDI 60 while remaining
distinct, ordered values.

Arithmetic returns new pitches:

- ``p + n`` / ``p - n``: move by ``n`` semitones onto the canonical spelling
  (whole octaves keep the spelling); the octave is carried so that
  ``(p + n).midi == p.midi + n`` always holds.
- ``p * r`` / ``p / r``: scale the frequency by ``r`` and snap back to the
  nearest equal-tempered pitch. This is lossy: ``(p * 1.5) / 1.5`` is not
  guaranteed to return ``p``.
- ``p % q``: frequency ratio ``p.hz / q.hz`` as a float.
"""

import dataclasses
import numbers
import typing

import diatonic.conversions
import diatonic.exceptions
import diatonic.pitch_class


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class Pitch:

	"""
	A spelled pitch class in a particular octave.

	Pitches order by MIDI number first, then octave, then spelling, which gives
	a strict total order in which enharmonics are adjacent but never tied.

	Example:
		```python
		c4 = Pitch(PitchClass.from_string("C"), 4)
		c4.midi          # → 60
		(c4 + 1)         # → C♯4
		(c4 - 1)         # → B3
		Pitch.from_hz(440.0)  # → A4
		```
	"""

	spelling: diatonic.pitch_class.Spelling
	octave: int


	def __post_init__ (self) -> None:

		if not isinstance(self.spelling, diatonic.pitch_class.Spelling):
			raise diatonic.exceptions.InvalidConstructionArgument(
				f"Expected spelling to be a PitchClass or Accidental, got {self.spelling!r}"
			)

		if not isinstance(self.octave, int) or isinstance(self.octave, bool):
			raise diatonic.exceptions.InvalidConstructionArgument(
				f"Expected octave to be an int, got {self.octave!r}"
			)


	@classmethod
	def from_midi (cls, i: int) -> "Pitch":

		"""
		Build a pitch from a MIDI note number using the canonical sharp spelling.

		Values outside 0-127 are accepted and give pitches below C-1 or above G9.
		"""

		return cls(diatonic.pitch_class.PitchClass.from_integer(i), i // 12 - 1)


	from_integer = from_midi


	@classmethod
	def from_hz (cls, hz: float) -> "Pitch":

		"""Nearest equal-tempered pitch to ``hz``."""

		return cls.from_midi(diatonic.conversions.ftom(hz))


	from_float = from_hz


	@property
	def midi (self) -> int:
		return self.spelling.rank + (self.octave + 1) * 12


	@property
	def hz (self) -> float:
		return diatonic.conversions.mtof(self.midi)


	@property
	def acc_i (self) -> int:
		return self.spelling.acc_i


	@property
	def sharp (self) -> "Pitch":
		return Pitch(self.spelling.sharp, self.octave)


	@property
	def flat (self) -> "Pitch":
		return Pitch(self.spelling.flat, self.octave)


	def acc (self, i: int) -> "Pitch":

		"""Apply ``i`` accidentals to the spelling, keeping the octave."""

		return Pitch(self.spelling.acc(i), self.octave)


	def __add__ (self, n: int) -> "Pitch":

		if not isinstance(n, int):
			return NotImplemented

		# Whole octaves keep the spelling, so C♭4 + 12 is C♭5 rather than B4.
		if n % 12 == 0:
			return Pitch(self.spelling, self.octave + n // 12)

		spelling = self.spelling + n
		midi = self.midi + n

		return Pitch(spelling, (midi - spelling.rank) // 12 - 1)


	def __sub__ (self, n: int) -> "Pitch":

		if not isinstance(n, int):
			return NotImplemented

		return self + -n


	def __mul__ (self, factor: float) -> "Pitch":

		if not isinstance(factor, numbers.Real):
			return NotImplemented

		return Pitch.from_hz(self.hz * factor)


	def __truediv__ (self, factor: float) -> "Pitch":

		if not isinstance(factor, numbers.Real):
			return NotImplemented

		return Pitch.from_hz(self.hz / factor)


	def __mod__ (self, other: "Pitch") -> float:

		if not isinstance(other, Pitch):
			return NotImplemented

		return self.hz / other.hz


	def nearest (self, pc: diatonic.pitch_class.Spelling) -> "Pitch":

		"""
		Return the pitch spelled ``pc`` closest to this one.

		Uses the unreduced rank distance between the two spellings: under 6 the
		octave is kept, otherwise the pitch one octave down is returned. A tie at
		exactly 6 resolves to the lower octave.

		Example:
			```python
			c4.nearest(PitchClass.from_string("D"))  # → D4
			c4.nearest(PitchClass.from_string("B"))  # → B3
			```
		"""

		distance = abs(self.spelling.rank - pc.rank)

		if distance < 6:
			return Pitch(pc, self.octave)

		return Pitch(pc, self.octave - 1)


	def text (self, style: str = "unicode") -> str:
		return f"{self.spelling.text(style)}{self.octave}"


	def _key (self) -> typing.Tuple[int, int, diatonic.pitch_class.Spelling]:
		return (self.midi, self.octave, self.spelling)


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Pitch):
			return NotImplemented

		return self._key() == other._key()


	def __lt__ (self, other: "Pitch") -> bool:

		if not isinstance(other, Pitch):
			return NotImplemented

		return self._key() < other._key()


	def __le__ (self, other: "Pitch") -> bool:

		if not isinstance(other, Pitch):
			return NotImplemented

		return self._key() <= other._key()


	def __gt__ (self, other: "Pitch") -> bool:

		if not isinstance(other, Pitch):
			return NotImplemented

		return self._key() > other._key()


	def __ge__ (self, other: "Pitch") -> bool:

		if not isinstance(other, Pitch):
			return NotImplemented

		return self._key() >= other._key()


	def __hash__ (self) -> int:
		return hash((self.octave, self.spelling))


	def __int__ (self) -> int:
		return self.midi


	def __float__ (self) -> float:
		return self.hz


	def __str__ (self) -> str:
		return self.text()


	def __repr__ (self) -> str:
		return f"Pitch({self.text('ascii')})"
