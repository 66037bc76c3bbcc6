"""Named pitch constants.

Constants are named ``<Letter><Octave>`` for naturals, ``<Letter>S<Octave>``
for sharps and ``<Letter>F<Octave>`` for flats. Octave -1 is written with an
underscore (``C_1`` is C-1, MIDI 0). Convention: **C4 = 60** (Middle C)::

    import diatonic.constants.pitches as p

    p.A4.midi       # 69
    p.A4.hz         # 440.0
    p.BS3.midi      # 60, same key as p.C4 but a different pitch
    p.CF4 < p.BS3   # True

Range: ``C_1`` (MIDI 0) through ``G9`` (MIDI 127). Every spelling with a
single accidental is provided wherever its MIDI number stays in that range.
"""

import diatonic.constants.pitch_classes as pcs
import diatonic.pitch


_Pitch = diatonic.pitch.Pitch


# ── Octave -1 ──
C_1   = _Pitch(pcs.C, -1)
CS_1  = _Pitch(pcs.CS, -1)
DF_1  = _Pitch(pcs.DF, -1)
D_1   = _Pitch(pcs.D, -1)
DS_1  = _Pitch(pcs.DS, -1)
EF_1  = _Pitch(pcs.EF, -1)
E_1   = _Pitch(pcs.E, -1)
ES_1  = _Pitch(pcs.ES, -1)
FF_1  = _Pitch(pcs.FF, -1)
F_1   = _Pitch(pcs.F, -1)
FS_1  = _Pitch(pcs.FS, -1)
GF_1  = _Pitch(pcs.GF, -1)
G_1   = _Pitch(pcs.G, -1)
GS_1  = _Pitch(pcs.GS, -1)
AF_1  = _Pitch(pcs.AF, -1)
A_1   = _Pitch(pcs.A, -1)
AS_1  = _Pitch(pcs.AS, -1)
BF_1  = _Pitch(pcs.BF, -1)
B_1   = _Pitch(pcs.B, -1)
BS_1  = _Pitch(pcs.BS, -1)

# ── Octave 0 ──
CF0   = _Pitch(pcs.CF, 0)
C0    = _Pitch(pcs.C, 0)
CS0   = _Pitch(pcs.CS, 0)
DF0   = _Pitch(pcs.DF, 0)
D0    = _Pitch(pcs.D, 0)
DS0   = _Pitch(pcs.DS, 0)
EF0   = _Pitch(pcs.EF, 0)
E0    = _Pitch(pcs.E, 0)
ES0   = _Pitch(pcs.ES, 0)
FF0   = _Pitch(pcs.FF, 0)
F0    = _Pitch(pcs.F, 0)
FS0   = _Pitch(pcs.FS, 0)
GF0   = _Pitch(pcs.GF, 0)
G0    = _Pitch(pcs.G, 0)
GS0   = _Pitch(pcs.GS, 0)
AF0   = _Pitch(pcs.AF, 0)
A0    = _Pitch(pcs.A, 0)
AS0   = _Pitch(pcs.AS, 0)
BF0   = _Pitch(pcs.BF, 0)
B0    = _Pitch(pcs.B, 0)
BS0   = _Pitch(pcs.BS, 0)

# ── Octave 1 ──
CF1   = _Pitch(pcs.CF, 1)
C1    = _Pitch(pcs.C, 1)
CS1   = _Pitch(pcs.CS, 1)
DF1   = _Pitch(pcs.DF, 1)
D1    = _Pitch(pcs.D, 1)
DS1   = _Pitch(pcs.DS, 1)
EF1   = _Pitch(pcs.EF, 1)
E1    = _Pitch(pcs.E, 1)
ES1   = _Pitch(pcs.ES, 1)
FF1   = _Pitch(pcs.FF, 1)
F1    = _Pitch(pcs.F, 1)
FS1   = _Pitch(pcs.FS, 1)
GF1   = _Pitch(pcs.GF, 1)
G1    = _Pitch(pcs.G, 1)
GS1   = _Pitch(pcs.GS, 1)
AF1   = _Pitch(pcs.AF, 1)
A1    = _Pitch(pcs.A, 1)
AS1   = _Pitch(pcs.AS, 1)
BF1   = _Pitch(pcs.BF, 1)
B1    = _Pitch(pcs.B, 1)
BS1   = _Pitch(pcs.BS, 1)

# ── Octave 2 ──
CF2   = _Pitch(pcs.CF, 2)
C2    = _Pitch(pcs.C, 2)
CS2   = _Pitch(pcs.CS, 2)
DF2   = _Pitch(pcs.DF, 2)
D2    = _Pitch(pcs.D, 2)
DS2   = _Pitch(pcs.DS, 2)
EF2   = _Pitch(pcs.EF, 2)
E2    = _Pitch(pcs.E, 2)
ES2   = _Pitch(pcs.ES, 2)
FF2   = _Pitch(pcs.FF, 2)
F2    = _Pitch(pcs.F, 2)
FS2   = _Pitch(pcs.FS, 2)
GF2   = _Pitch(pcs.GF, 2)
G2    = _Pitch(pcs.G, 2)
GS2   = _Pitch(pcs.GS, 2)
AF2   = _Pitch(pcs.AF, 2)
A2    = _Pitch(pcs.A, 2)
AS2   = _Pitch(pcs.AS, 2)
BF2   = _Pitch(pcs.BF, 2)
B2    = _Pitch(pcs.B, 2)
BS2   = _Pitch(pcs.BS, 2)

# ── Octave 3 ──
CF3   = _Pitch(pcs.CF, 3)
C3    = _Pitch(pcs.C, 3)
CS3   = _Pitch(pcs.CS, 3)
DF3   = _Pitch(pcs.DF, 3)
D3    = _Pitch(pcs.D, 3)
DS3   = _Pitch(pcs.DS, 3)
EF3   = _Pitch(pcs.EF, 3)
E3    = _Pitch(pcs.E, 3)
ES3   = _Pitch(pcs.ES, 3)
FF3   = _Pitch(pcs.FF, 3)
F3    = _Pitch(pcs.F, 3)
FS3   = _Pitch(pcs.FS, 3)
GF3   = _Pitch(pcs.GF, 3)
G3    = _Pitch(pcs.G, 3)
GS3   = _Pitch(pcs.GS, 3)
AF3   = _Pitch(pcs.AF, 3)
A3    = _Pitch(pcs.A, 3)
AS3   = _Pitch(pcs.AS, 3)
BF3   = _Pitch(pcs.BF, 3)
B3    = _Pitch(pcs.B, 3)
BS3   = _Pitch(pcs.BS, 3)

# ── Octave 4 - Middle C ──
CF4   = _Pitch(pcs.CF, 4)
C4    = _Pitch(pcs.C, 4)
CS4   = _Pitch(pcs.CS, 4)
DF4   = _Pitch(pcs.DF, 4)
D4    = _Pitch(pcs.D, 4)
DS4   = _Pitch(pcs.DS, 4)
EF4   = _Pitch(pcs.EF, 4)
E4    = _Pitch(pcs.E, 4)
ES4   = _Pitch(pcs.ES, 4)
FF4   = _Pitch(pcs.FF, 4)
F4    = _Pitch(pcs.F, 4)
FS4   = _Pitch(pcs.FS, 4)
GF4   = _Pitch(pcs.GF, 4)
G4    = _Pitch(pcs.G, 4)
GS4   = _Pitch(pcs.GS, 4)
AF4   = _Pitch(pcs.AF, 4)
A4    = _Pitch(pcs.A, 4)
AS4   = _Pitch(pcs.AS, 4)
BF4   = _Pitch(pcs.BF, 4)
B4    = _Pitch(pcs.B, 4)
BS4   = _Pitch(pcs.BS, 4)

# ── Octave 5 ──
CF5   = _Pitch(pcs.CF, 5)
C5    = _Pitch(pcs.C, 5)
CS5   = _Pitch(pcs.CS, 5)
DF5   = _Pitch(pcs.DF, 5)
D5    = _Pitch(pcs.D, 5)
DS5   = _Pitch(pcs.DS, 5)
EF5   = _Pitch(pcs.EF, 5)
E5    = _Pitch(pcs.E, 5)
ES5   = _Pitch(pcs.ES, 5)
FF5   = _Pitch(pcs.FF, 5)
F5    = _Pitch(pcs.F, 5)
FS5   = _Pitch(pcs.FS, 5)
GF5   = _Pitch(pcs.GF, 5)
G5    = _Pitch(pcs.G, 5)
GS5   = _Pitch(pcs.GS, 5)
AF5   = _Pitch(pcs.AF, 5)
A5    = _Pitch(pcs.A, 5)
AS5   = _Pitch(pcs.AS, 5)
BF5   = _Pitch(pcs.BF, 5)
B5    = _Pitch(pcs.B, 5)
BS5   = _Pitch(pcs.BS, 5)

# ── Octave 6 ──
CF6   = _Pitch(pcs.CF, 6)
C6    = _Pitch(pcs.C, 6)
CS6   = _Pitch(pcs.CS, 6)
DF6   = _Pitch(pcs.DF, 6)
D6    = _Pitch(pcs.D, 6)
DS6   = _Pitch(pcs.DS, 6)
EF6   = _Pitch(pcs.EF, 6)
E6    = _Pitch(pcs.E, 6)
ES6   = _Pitch(pcs.ES, 6)
FF6   = _Pitch(pcs.FF, 6)
F6    = _Pitch(pcs.F, 6)
FS6   = _Pitch(pcs.FS, 6)
GF6   = _Pitch(pcs.GF, 6)
G6    = _Pitch(pcs.G, 6)
GS6   = _Pitch(pcs.GS, 6)
AF6   = _Pitch(pcs.AF, 6)
A6    = _Pitch(pcs.A, 6)
AS6   = _Pitch(pcs.AS, 6)
BF6   = _Pitch(pcs.BF, 6)
B6    = _Pitch(pcs.B, 6)
BS6   = _Pitch(pcs.BS, 6)

# ── Octave 7 ──
CF7   = _Pitch(pcs.CF, 7)
C7    = _Pitch(pcs.C, 7)
CS7   = _Pitch(pcs.CS, 7)
DF7   = _Pitch(pcs.DF, 7)
D7    = _Pitch(pcs.D, 7)
DS7   = _Pitch(pcs.DS, 7)
EF7   = _Pitch(pcs.EF, 7)
E7    = _Pitch(pcs.E, 7)
ES7   = _Pitch(pcs.ES, 7)
FF7   = _Pitch(pcs.FF, 7)
F7    = _Pitch(pcs.F, 7)
FS7   = _Pitch(pcs.FS, 7)
GF7   = _Pitch(pcs.GF, 7)
G7    = _Pitch(pcs.G, 7)
GS7   = _Pitch(pcs.GS, 7)
AF7   = _Pitch(pcs.AF, 7)
A7    = _Pitch(pcs.A, 7)
AS7   = _Pitch(pcs.AS, 7)
BF7   = _Pitch(pcs.BF, 7)
B7    = _Pitch(pcs.B, 7)
BS7   = _Pitch(pcs.BS, 7)

# ── Octave 8 ──
CF8   = _Pitch(pcs.CF, 8)
C8    = _Pitch(pcs.C, 8)
CS8   = _Pitch(pcs.CS, 8)
DF8   = _Pitch(pcs.DF, 8)
D8    = _Pitch(pcs.D, 8)
DS8   = _Pitch(pcs.DS, 8)
EF8   = _Pitch(pcs.EF, 8)
E8    = _Pitch(pcs.E, 8)
ES8   = _Pitch(pcs.ES, 8)
FF8   = _Pitch(pcs.FF, 8)
F8    = _Pitch(pcs.F, 8)
FS8   = _Pitch(pcs.FS, 8)
GF8   = _Pitch(pcs.GF, 8)
G8    = _Pitch(pcs.G, 8)
GS8   = _Pitch(pcs.GS, 8)
AF8   = _Pitch(pcs.AF, 8)
A8    = _Pitch(pcs.A, 8)
AS8   = _Pitch(pcs.AS, 8)
BF8   = _Pitch(pcs.BF, 8)
B8    = _Pitch(pcs.B, 8)
BS8   = _Pitch(pcs.BS, 8)

# ── Octave 9 ──
CF9   = _Pitch(pcs.CF, 9)
C9    = _Pitch(pcs.C, 9)
CS9   = _Pitch(pcs.CS, 9)
DF9   = _Pitch(pcs.DF, 9)
D9    = _Pitch(pcs.D, 9)
DS9   = _Pitch(pcs.DS, 9)
EF9   = _Pitch(pcs.EF, 9)
E9    = _Pitch(pcs.E, 9)
ES9   = _Pitch(pcs.ES, 9)
FF9   = _Pitch(pcs.FF, 9)
F9    = _Pitch(pcs.F, 9)
FS9   = _Pitch(pcs.FS, 9)
GF9   = _Pitch(pcs.GF, 9)
G9    = _Pitch(pcs.G, 9)
