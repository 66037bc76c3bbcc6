import typing

import pytest
import yaml

import diatonic.constants.pitch_classes as pcs


ALL_SINGLE_SPELLINGS: typing.List[typing.Any] = [
	pcs.CF, pcs.C, pcs.CS,
	pcs.DF, pcs.D, pcs.DS,
	pcs.EF, pcs.E, pcs.ES,
	pcs.FF, pcs.F, pcs.FS,
	pcs.GF, pcs.G, pcs.GS,
	pcs.AF, pcs.A, pcs.AS,
	pcs.BF, pcs.B, pcs.BS,
]


@pytest.fixture
def spellings () -> typing.List[typing.Any]:

	"""Every natural plus its single sharp and flat, and a few deeper chains."""

	return ALL_SINGLE_SPELLINGS + [pcs.C.acc(2), pcs.B.acc(3), pcs.F.acc(-2), pcs.E.acc(-4)]


@pytest.fixture
def write_config (tmp_path: typing.Any) -> typing.Callable[[dict], str]:

	"""Return a helper that writes a YAML settings file and returns its path."""

	def _write (settings: dict) -> str:

		path = tmp_path / "diatonic.yaml"
		path.write_text(yaml.safe_dump(settings))
		return str(path)

	return _write
