import dataclasses

import pytest

from secretkit.errors import ConfigError
from secretkit.pool import GenerationOptions, build_pool, DEFAULT_SYMBOLS


def test_pool_order_digits_symbols_lower_upper():
    pool = build_pool(GenerationOptions(numbers=True, symbols=True))
    assert pool.characters == (
        "0123456789" + DEFAULT_SYMBOLS + "abcdefghijklmnopqrstuvwxyz" + "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    )
    assert len(pool.classes) == 4

def test_symbols_string_used_verbatim():
    pool = build_pool(GenerationOptions(symbols="#-", lowercase=False, uppercase=False))
    assert pool.characters == "#-"
    assert pool.classes == ("#-",)

def test_empty_symbols_string_is_disabled():
    with pytest.raises(ConfigError):
        build_pool(GenerationOptions(symbols="", lowercase=False, uppercase=False))

def test_exclude_similar():
    pool = build_pool(GenerationOptions(numbers=True, symbols=True, exclude_similar_characters=True))
    for c in "ilLI|oO0":
        assert c not in pool.characters
        assert all(c not in cls for cls in pool.classes)
    assert "1" in pool.characters

def test_exclude_is_membership_not_pattern():
    pool = build_pool(GenerationOptions(symbols=".*", lowercase=False, uppercase=False, numbers=True, exclude="[0-2]"))
    # only the literal characters '[', '0', '-', '2', ']' go
    assert pool.characters == "13456789.*"

def test_class_emptied_by_exclusion_is_dropped():
    pool = build_pool(GenerationOptions(numbers=True, exclude="0123456789"))
    assert len(pool.classes) == 2
    assert not any(c.isdigit() for c in pool.characters)

def test_empty_pool_raises():
    with pytest.raises(ConfigError):
        build_pool(GenerationOptions(lowercase=False, exclude="ABCDEFGHIJKLMNOPQRSTUVWXYZ"))

def test_no_classes_raises():
    with pytest.raises(ConfigError):
        build_pool(GenerationOptions(lowercase=False, uppercase=False))

@pytest.mark.parametrize("length", [-1, 2.5, "8", True])
def test_bad_length_rejected(length):
    with pytest.raises(ConfigError):
        GenerationOptions(length=length)

def test_options_are_frozen():
    opts = GenerationOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.length = 3

@pytest.mark.parametrize("field,value", [
    ("numbers", "false"),
    ("lowercase", 0),
    ("strict", None),
    ("exclude_similar_characters", "yes"),
    ("symbols", 1),
    ("exclude", ["a"]),
])
def test_bad_option_types_rejected(field, value):
    with pytest.raises(ConfigError):
        GenerationOptions(**{field: value})
