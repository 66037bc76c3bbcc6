import logging
import typing

import mido

import diatonic.pitch


logger = logging.getLogger(__name__)

NOTE_MESSAGE_TYPES: typing.Tuple[str, ...] = ("note_on", "note_off")


def note_on (pitch: diatonic.pitch.Pitch, velocity: int = 100, channel: int = 0) -> mido.Message:

	"""
	Build a ``note_on`` message for a pitch.

	mido rejects pitches outside MIDI 0-127 with a ``ValueError``.

	Example:
		```python
		note_on(diatonic.constants.pitches.A4)  # note_on channel=0 note=69 velocity=100
		```
	"""

	message = mido.Message("note_on", note=pitch.midi, velocity=velocity, channel=channel)
	logger.debug(f"{pitch} → {message}")
	return message


def note_off (pitch: diatonic.pitch.Pitch, velocity: int = 0, channel: int = 0) -> mido.Message:

	"""Build a ``note_off`` message for a pitch."""

	message = mido.Message("note_off", note=pitch.midi, velocity=velocity, channel=channel)
	logger.debug(f"{pitch} → {message}")
	return message


def pitch_from_message (message: mido.Message) -> diatonic.pitch.Pitch:

	"""
	Return the pitch carried by a ``note_on`` or ``note_off`` message.

	The note number is spelled canonically (``Pitch.from_midi``), so a message
	built from ``D♭4`` comes back as ``C♯4``.

	Raises:
		ValueError: For any other message type.
	"""

	if message.type not in NOTE_MESSAGE_TYPES:
		raise ValueError(f"Expected a note_on or note_off message, got {message.type!r}")

	return diatonic.pitch.Pitch.from_midi(message.note)
