import pytest

from secretkit.generator import generate
from secretkit.strength import check_password_strength


def test_lowercase_only_is_weak():
    result = check_password_strength("abcdefghijkl")
    assert result["score"] == 2
    assert result["label"] == "Weak"
    assert result["criteria"]["length"] and result["criteria"]["lowercase"]

def test_all_criteria_very_strong():
    result = check_password_strength("Abcdefghij1!")
    assert result["score"] == 5
    assert result["label"] == "Very Strong"
    assert all(result["criteria"].values())

@pytest.mark.parametrize("password,label", [
    ("", "Weak"),
    ("aB", "Weak"),
    ("aB1", "Moderate"),
    ("aB1!", "Strong"),
    ("abcdefghijK1", "Strong"),
    ("Abcdefghijkl", "Moderate"),
])
def test_labels(password, label):
    assert check_password_strength(password)["label"] == label

def test_length_has_no_bonus_beyond_twelve():
    short = check_password_strength("abcdefghijkl")
    long = check_password_strength("abcdefghijkl" * 10)
    assert short["score"] == long["score"]

def test_special_set_is_fixed():
    # '-' and '~' are not in the special-character set
    assert not check_password_strength("a-~")["criteria"]["special"]
    assert check_password_strength("a]")["criteria"]["special"]
    assert check_password_strength("|")["criteria"]["special"]

def test_non_ascii_digits_do_not_count():
    assert not check_password_strength("٣")["criteria"]["digit"]

def test_strict_generated_password_scores_high():
    pw = generate(length=16, numbers=True, symbols=True, strict=True)
    assert check_password_strength(pw)["score"] >= 4
