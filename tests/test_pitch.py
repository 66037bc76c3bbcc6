import fractions
import itertools

import pytest

import diatonic.constants.pitch_classes as pcs
import diatonic.constants.pitches as p
import diatonic.exceptions
import diatonic.pitch


Pitch = diatonic.pitch.Pitch


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_from_midi_scenarios () -> None:

	"""MIDI 0, 69 and 127 map to C-1, A4 and G9."""

	assert Pitch.from_midi(0) == p.C_1
	assert Pitch.from_midi(69) == p.A4
	assert Pitch.from_midi(127) == p.G9

	a4 = Pitch.from_midi(69)

	assert a4.midi == 69
	assert a4.spelling.letter == "A"
	assert a4.octave == 4


def test_from_midi_round_trip () -> None:

	"""from_midi(i).midi == i, including values outside 0-127."""

	for i in range(-40, 180):
		assert Pitch.from_midi(i).midi == i
		assert Pitch.from_integer(i).midi == i


def test_from_midi_floors_negative_octaves () -> None:

	"""Negative MIDI numbers use floor division for the octave."""

	below = Pitch.from_midi(-1)

	assert below.spelling == pcs.B
	assert below.octave == -2


def test_from_hz () -> None:

	"""Frequencies snap to the nearest equal-tempered pitch."""

	assert Pitch.from_hz(440.0) == p.A4
	assert Pitch.from_hz(261.62) == p.C4
	assert Pitch.from_hz(220.0) == p.A3
	assert Pitch.from_float(880.0) == p.A5


def test_constructor_validates_spelling () -> None:

	"""A spelling must be a PitchClass or Accidental."""

	with pytest.raises(diatonic.exceptions.InvalidConstructionArgument):
		Pitch("C", 4)

	with pytest.raises(TypeError):
		Pitch(0, 4)


def test_constructor_validates_octave () -> None:

	"""The octave must be an int."""

	with pytest.raises(diatonic.exceptions.InvalidConstructionArgument):
		Pitch(pcs.C, 4.0)

	with pytest.raises(diatonic.exceptions.InvalidConstructionArgument):
		Pitch(pcs.C, "4")


def test_midi_uses_unreduced_rank () -> None:

	"""B♯3 and C4 share MIDI 60; C♭4 sits at 59."""

	assert p.BS3.midi == 60
	assert p.C4.midi == 60
	assert p.CF4.midi == 59


def test_hz () -> None:

	"""hz and float() give the equal-tempered frequency."""

	assert p.A4.hz == pytest.approx(440.0)
	assert float(p.A3) == pytest.approx(220.0)
	assert p.C4.hz == pytest.approx(261.6256, abs=1e-4)
	assert int(p.C4) == 60


# ---------------------------------------------------------------------------
# Ordering, equality, hashing
# ---------------------------------------------------------------------------

def test_ordering_cases () -> None:

	"""Semitones, enharmonics and octaves all order as expected."""

	cases = [
		(p.C4, p.CS4),   # raised by a semitone
		(p.CS4, p.DF4),  # enharmonics
		(p.ES4, p.F4),
		(p.C3, p.C4),    # across octaves
		(p.BS3, p.C4),
		(p.CF4, p.BS3),
	]

	for lower, upper in cases:
		assert lower < upper
		assert upper > lower
		assert lower != upper


def test_same_octave_enharmonic_tie_broken_by_spelling () -> None:

	"""C4 and D♭♭4 share MIDI and octave; spelling decides."""

	dbb4 = p.D4.acc(-2)

	assert dbb4.midi == p.C4.midi
	assert p.C4 < dbb4
	assert p.C4 != dbb4


def test_ordering_is_a_strict_total_order () -> None:

	"""Trichotomy and transitivity over a mixed set of pitches."""

	pitches = [
		p.C4, p.BS3, p.DF4, p.CS4, p.CF4, p.B3, p.D4.acc(-2),
		p.C_1, p.G9, p.ES4, p.F4, p.FF4, p.E4, Pitch.from_midi(-5),
	]

	for a, b in itertools.product(pitches, repeat=2):
		assert [a < b, a == b, a > b].count(True) == 1

	for a, b, c in itertools.product(pitches, repeat=3):
		if a < b and b < c:
			assert a < c

	ordered = sorted(pitches)

	assert ordered[0] == Pitch.from_midi(-5)
	assert ordered[-1] == p.G9
	assert [x.midi for x in ordered] == sorted(x.midi for x in pitches)


def test_hash () -> None:

	"""Equal pitches hash equally; enharmonics do not collide."""

	assert hash(p.C4) == hash(Pitch(pcs.C, 4))
	assert hash(p.CS4) != hash(p.DF4)

	lookup = {p.C4: "middle C", p.BS3: "B sharp"}

	assert lookup[Pitch.from_midi(60)] == "middle C"
	assert len(lookup) == 2


def test_pitch_is_immutable () -> None:

	"""Pitches are frozen values."""

	with pytest.raises(AttributeError):
		p.C4.octave = 5


# ---------------------------------------------------------------------------
# Semitone arithmetic
# ---------------------------------------------------------------------------

def test_add_semitones () -> None:

	"""Adding semitones moves spelling and octave together."""

	assert p.C4 + 1 == p.CS4
	assert p.C4 + -1 == p.B3
	assert p.C4 + 12 == p.C5
	assert p.C4 + -12 == p.C3
	assert p.B3 + 1 == p.C4
	assert p.A4 + 3 == p.C5


def test_subtract_semitones () -> None:

	"""Subtraction is addition of the negation."""

	assert p.C4 - -1 == p.CS4
	assert p.C4 - 1 == p.B3
	assert p.C4 - -12 == p.C5
	assert p.C4 - 12 == p.C3


def test_addition_keeps_midi_invariant () -> None:

	"""(p + n).midi == p.midi + n for every spelling and shift."""

	starts = [p.C4, p.BS3, p.CF4, p.ES2, p.FF5, p.GS_1, p.D4.acc(-2), p.B4.acc(2)]

	for start in starts:
		for n in range(-30, 31):
			assert (start + n).midi == start.midi + n


def test_octave_shift_keeps_letter () -> None:

	"""Adding 12 moves up an octave without respelling."""

	for start in [p.C4, p.BS3, p.CF4, p.ES2, p.FF5, p.BF_1, p.G9]:
		shifted = start + 12

		assert shifted.midi == start.midi + 12
		assert shifted.spelling == start.spelling
		assert shifted.octave == start.octave + 1
		assert start - 12 + 12 == start


def test_octave_carry_on_unreduced_spellings () -> None:

	"""B♯ and C♭ spellings carry the octave across the C boundary."""

	assert p.BS3 + 1 == p.CS4
	assert (p.BS3 + 1).midi == 61
	assert p.ES4 + 1 == p.FS4
	assert p.BS3 - 1 == p.B3
	assert p.CF4 - 1 == p.AS3
	assert p.CF4 + 1 == p.C4
	assert (p.CF4 - 1).midi == 58


def test_add_rejects_floats () -> None:

	"""Semitone arithmetic is integer-only."""

	with pytest.raises(TypeError):
		p.C4 + 0.5


# ---------------------------------------------------------------------------
# Frequency arithmetic
# ---------------------------------------------------------------------------

def test_multiply_scales_frequency () -> None:

	"""Multiplying scales the frequency and snaps to the lattice."""

	assert p.C4 * 2 == p.C5
	assert p.C4 * 0.5 == p.C3
	assert p.C4 * 1.5 == p.G4


def test_divide_scales_frequency () -> None:

	"""Division scales by the reciprocal."""

	assert p.C4 / 0.5 == p.C5
	assert p.C4 / 2 == p.C3


def test_scaling_by_fractions () -> None:

	"""Any real factor works, including exact fractions."""

	assert p.C4 * fractions.Fraction(3, 2) == p.G4
	assert p.C4 / fractions.Fraction(1, 2) == p.C5
	assert p.A4 * fractions.Fraction(1, 2) == p.A3


def test_scaling_rejects_non_numbers () -> None:

	"""Multiplying by a string is a TypeError."""

	with pytest.raises(TypeError):
		p.C4 * "2"


def test_frequency_scaling_respells_canonically () -> None:

	"""Scaling goes through from_hz, so flats come back as sharps."""

	assert p.DF4 * 1 == p.CS4
	assert (p.DF4 * 2) / 2 == p.CS4


def test_ratio () -> None:

	"""% returns the frequency ratio of two pitches."""

	assert p.C4 % p.C5 == pytest.approx(0.5)
	assert p.C5 % p.C4 == pytest.approx(2.0)

	for octave in ("_1", "4", "9"):
		c = getattr(p, "C" + octave)
		f = getattr(p, "F" + octave)
		g = getattr(p, "G" + octave)

		assert f % c == pytest.approx(1.334840, abs=1e-6)
		assert g % c == pytest.approx(1.498307, abs=1e-6)


# ---------------------------------------------------------------------------
# Accidentals and nearest
# ---------------------------------------------------------------------------

def test_sharp_flat_acc () -> None:

	"""Accidentals apply to the spelling and keep the octave."""

	assert p.C4.sharp == p.CS4
	assert p.D4.flat == p.DF4
	assert p.C4.acc(2) == p.CS4.sharp
	assert p.C4.acc(2).midi == 62
	assert p.C4.acc(2).octave == 4
	assert p.CS4.acc_i == 1
	assert p.BF3.acc_i == -1


def test_nearest () -> None:

	"""nearest() keeps the octave under distance 6, otherwise goes down one."""

	assert p.C4.nearest(pcs.B) == p.B3
	assert p.C4.nearest(pcs.BS) == p.BS3
	assert p.C4.nearest(pcs.C) == p.C4
	assert p.C4.nearest(pcs.D) == p.D4
	assert p.C4.nearest(pcs.FS) == p.FS3
	assert p.C4.nearest(pcs.F) == p.F4


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def test_text () -> None:

	"""Pitches render as spelling plus octave."""

	assert str(p.CS4) == "C♯4"
	assert str(p.C_1) == "C-1"
	assert p.BF3.text("ascii") == "Bb3"
	assert repr(p.EF2) == "Pitch(Eb2)"
