"""Friendly constructor vocabulary for Diatonic.

- ``diatonic.constants.pitch_classes`` - ``C``, ``CS``, ``DF``, … one spelling
  per natural letter with an optional single sharp or flat
- ``diatonic.constants.pitches`` - ``C_1`` … ``G9``, C4 = 60 (Middle C)

These modules carry no logic of their own: every constant is an ordinary
``PitchClass``, ``Sharp``, ``Flat`` or ``Pitch`` value.
"""
