"""Describe pitches from the command line.

Usage::

    python -m diatonic C4 Bb3 61 440hz 261.6
    python -m diatonic --ascii --transpose 7 F#4
    python -m diatonic --config my_settings.yaml A4

Each value may be a spelled pitch (``"Eb3"``), a MIDI note number (``"61"``) or a
frequency (``"261.6"`` or ``"440hz"``). Settings are read from a YAML file::

    notation:
      style: ascii      # or unicode (default)
    logging:
      level: DEBUG
"""

import argparse
import logging
import os
import typing

import yaml

import diatonic.notation
import diatonic.pitch
import diatonic.pitch_class


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "diatonic.yaml"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def read_settings (config: typing.Any) -> typing.Tuple[str, str]:

	"""
	Return the (logging level, notation style) named by a loaded config.

	Raises:
		ValueError: If the config is not a mapping, or a setting is unknown.
	"""

	if not isinstance(config, dict):
		raise ValueError(f"expected a mapping of settings, got {type(config).__name__}")

	sections = {name: config.get(name) or {} for name in ("logging", "notation")}

	for name, section in sections.items():
		if not isinstance(section, dict):
			raise ValueError(f"'{name}' must be a mapping, got {section!r}")

	level = str(sections["logging"].get("level", "INFO")).upper()

	if not isinstance(logging.getLevelName(level), int):
		raise ValueError(f"unknown logging level {level!r}")

	style = diatonic.pitch_class.check_style(sections["notation"].get("style", "unicode"))

	return level, style


def parse_value (value: str) -> diatonic.pitch.Pitch:

	"""
	Interpret a command line value as a pitch.

	Integers are MIDI note numbers, decimals or values ending in ``hz`` are
	frequencies, and anything else is parsed as a spelled pitch name.

	Raises:
		InvalidPitchClassName: If the value is none of the above.
	"""

	text = value.strip()

	if text.lower().endswith("hz"):
		return diatonic.pitch.Pitch.from_hz(float(text[:-2]))

	try:
		return diatonic.pitch.Pitch.from_midi(int(text))
	except ValueError:
		pass

	try:
		return diatonic.pitch.Pitch.from_hz(float(text))
	except ValueError:
		pass

	return diatonic.notation.parse_pitch(text)


def describe (pitch: diatonic.pitch.Pitch, style: str = "unicode") -> str:

	"""One line summary: spelled name, MIDI number and frequency."""

	return f"{pitch.text(style):<8} midi={pitch.midi:<4} hz={pitch.hz:.3f}"


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the diatonic command line.
	"""

	parser = argparse.ArgumentParser(prog="diatonic", description="Describe spelled pitches")
	parser.add_argument("values", nargs="+", help="Pitch names, MIDI numbers or frequencies")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help=f"YAML settings file (default: {DEFAULT_CONFIG_PATH})")
	parser.add_argument("--ascii", action="store_true", help="Use # and b instead of ♯ and ♭")
	parser.add_argument("--transpose", type=int, default=0, help="Semitones to add to every value")
	args = parser.parse_args(argv)

	config = load_config(args.config)

	try:
		level, style = read_settings(config)
	except ValueError as exc:
		logger.error(f"Invalid config file {args.config}: {exc}")
		return 2

	logging.getLogger().setLevel(level)

	if args.ascii:
		style = "ascii"

	status = 0

	for value in args.values:
		try:
			pitch = parse_value(value) + args.transpose
		except (ValueError, OverflowError) as exc:
			logger.error(f"Cannot read {value!r}: {exc}")
			status = 1
			continue

		logger.debug(f"{value!r} → {pitch!r}")
		print(describe(pitch, style))

	return status


if __name__ == "__main__":
	raise SystemExit(main())
