"""Tests of the YAML telescope description."""
import math

import numpy as np
import pytest

from aotelescope import AiryTelescope, InvalidParameter
from aotelescope.config import (TelescopeParameters, load_from_str,
                                read_telescope_yaml)
from aotelescope.constants import radian2arcmin

from helpers import GaussianTelescope


def test_read_basic():
    D, params = read_telescope_yaml("""
D: 8.0
obstructionRatio: 0.14
conjugationHeight: 100.0
fieldOfViewInArcmin: 2.0
resolution: 128
""")
    assert D == 8.
    assert params == TelescopeParameters(obstructionRatio=0.14,
                                         conjugationHeight=100.,
                                         fieldOfViewInArcmin=2.,
                                         resolution=128)
    assert params.focalDistance == np.inf
    assert params.fieldOfViewInArcsec is None


def test_tags_are_not_evaluated():
    with pytest.raises(InvalidParameter):
        read_telescope_yaml("D: 8.0\nobstructionRatio: !eval 1.12/8\n")
    with pytest.raises(InvalidParameter):
        read_telescope_yaml("D: !!python/object/apply:os.getcwd []\n")


def test_malformed_document():
    with pytest.raises(InvalidParameter, match='Invalid telescope'):
        read_telescope_yaml("D: [8.0\n")
    with pytest.raises(InvalidParameter, match='Invalid telescope'):
        read_telescope_yaml("- 8.0\n- 0.14\n")
    with pytest.raises(InvalidParameter, match='Invalid telescope'):
        TelescopeParameters.from_yaml("just a string")


def test_non_string_key():
    with pytest.raises(InvalidParameter, match='strings'):
        read_telescope_yaml("D: 8.0\n1: 2\n")


def test_missing_diameter():
    with pytest.raises(InvalidParameter, match='D'):
        read_telescope_yaml("obstructionRatio: 0.3\n")


def test_empty_document():
    with pytest.raises(InvalidParameter):
        read_telescope_yaml("")
    assert TelescopeParameters.from_yaml("") == TelescopeParameters()


def test_unknown_key():
    with pytest.raises(InvalidParameter, match='Unknown'):
        read_telescope_yaml("D: 8.0\nwavelength: 0.5\n")


def test_invalid_value():
    with pytest.raises(InvalidParameter):
        read_telescope_yaml("D: 8.0\nobstructionRatio: 1.5\n")


def test_both_field_of_view_units():
    with pytest.raises(InvalidParameter):
        read_telescope_yaml("""
D: 8.0
fieldOfViewInArcsec: 60.0
fieldOfViewInArcmin: 1.0
""")


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError):
        load_from_str("- 1\n- 2\n")


def test_load_plain_mapping():
    assert load_from_str("a: 1.5\nb: [1, 2]\n") == {"a": 1.5, "b": [1, 2]}
    assert load_from_str("") == {}


def test_telescope_from_yaml():
    tel = GaussianTelescope.from_yaml("""
D: 4.0
obstructionRatio: 0.25
fieldOfViewInArcmin: 3.0
""")
    assert isinstance(tel, GaussianTelescope)
    assert tel.D == 4.
    assert tel.obstructionRatio == 0.25
    assert math.isclose(tel.fieldOfView, 3./radian2arcmin)


def test_airy_from_yaml_matches_keywords():
    tel = AiryTelescope.from_yaml("D: 2.0\nobstructionRatio: 0.3\n")
    ref = AiryTelescope(2., obstructionRatio=0.3)
    assert tel.area == ref.area
    assert tel.otf(1.) == ref.otf(1.)


def test_parameters_to_dict_and_equality():
    params = TelescopeParameters(obstructionRatio=0.2, resolution=16)
    d = params.to_dict()
    assert set(d) == set(TelescopeParameters.KEYS)
    assert TelescopeParameters(**d) == params
    assert params != TelescopeParameters(obstructionRatio=0.2)
    assert params != d
