import csv_annotator.utils.i18n  # noqa:F401

import pytest
from easydict import EasyDict as edict

from .env import coerce_value, load_cfg_from_env


def test_load_cfg_from_env():
    input_dict = {"ANNOTATE_a": 2, "ANNOTATE_eoq__trabson": 3}
    loaded = load_cfg_from_env(edict(), input_dict)
    assert loaded.a == 2
    assert loaded.eoq.trabson == 3


def test_load_cfg_from_env_keeps_default_types():
    cfg = edict({"detail": {"header_allowance": 4}, "keys": {"quit": ["q"]}})
    loaded = load_cfg_from_env(
        cfg, {"ANNOTATE_detail__header_allowance": "6", "ANNOTATE_keys__quit": "x,ctrl+c"}
    )
    assert loaded.detail.header_allowance == 6
    assert loaded.keys.quit == ["x", "ctrl+c"]


def test_load_cfg_from_env_custom_prefix():
    loaded = load_cfg_from_env(edict(), {"OTHER_a": "1", "ANNOTATE_b": "2"}, prefix="OTHER_")
    assert loaded == {"a": "1"}


@pytest.mark.parametrize(
    "value,default,expected",
    [
        ("true", False, True),
        ("0", True, False),
        ("7", 1, 7),
        ("0.25", 0.5, 0.25),
        ("a, b,,c", [], ["a", "b", "c"]),
        ("text", "other", "text"),
        ("text", None, "text"),
        (3, "other", 3),
    ],
)
def test_coerce_value(value, default, expected):
    assert coerce_value(value, default) == expected


def test_coerce_value_rejects_bad_numbers():
    with pytest.raises(ValueError):
        coerce_value("many", 3)
