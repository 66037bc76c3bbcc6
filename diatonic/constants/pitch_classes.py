"""Named pitch class constants.

One constant per natural letter, plus its single sharp (``S`` suffix) and
single flat (``F`` suffix)::

    import diatonic.constants.pitch_classes as pcs

    pcs.C          # C
    pcs.CS         # C♯
    pcs.DF         # D♭
    pcs.BS + 0     # B♯ (rank 12, still spelled B♯)

Each constant is exactly the value built by hand, e.g. ``pcs.FS == pcs.F.sharp``.
"""

import diatonic.pitch_class


# ── C ──
C  = diatonic.pitch_class.PitchClass.from_string("C")
CS = diatonic.pitch_class.Sharp(C)
CF = diatonic.pitch_class.Flat(C)

# ── D ──
D  = diatonic.pitch_class.PitchClass.from_string("D")
DS = diatonic.pitch_class.Sharp(D)
DF = diatonic.pitch_class.Flat(D)

# ── E ──
E  = diatonic.pitch_class.PitchClass.from_string("E")
ES = diatonic.pitch_class.Sharp(E)
EF = diatonic.pitch_class.Flat(E)

# ── F ──
F  = diatonic.pitch_class.PitchClass.from_string("F")
FS = diatonic.pitch_class.Sharp(F)
FF = diatonic.pitch_class.Flat(F)

# ── G ──
G  = diatonic.pitch_class.PitchClass.from_string("G")
GS = diatonic.pitch_class.Sharp(G)
GF = diatonic.pitch_class.Flat(G)

# ── A ──
A  = diatonic.pitch_class.PitchClass.from_string("A")
AS = diatonic.pitch_class.Sharp(A)
AF = diatonic.pitch_class.Flat(A)

# ── B ──
B  = diatonic.pitch_class.PitchClass.from_string("B")
BS = diatonic.pitch_class.Sharp(B)
BF = diatonic.pitch_class.Flat(B)
