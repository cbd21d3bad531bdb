"""Unit tests for stanpos.api.util.tagsets."""

import pytest

from stanpos.api.util.tagsets import CHINESE, DESCRIPTIONS, PENN, describe


@pytest.mark.parametrize(("tag", "expected"), [
    ("NN", "Noun, singular or mass"),
    ("PRP$", "Possessive pronoun"),
    ("NR", "Proper noun"),
    ("BA", "把 in ba-construction"),
    ("XYZ_UNKNOWN", ""),
    ("", ""),
    ("nn", ""),
])
@pytest.mark.unit
@pytest.mark.noexternal
def test_describe(tag: str, expected: str) -> None:
    """Test looking up tag descriptions."""
    assert describe(tag) == expected


@pytest.mark.unit
@pytest.mark.noexternal
def test_tables() -> None:
    """Test that both tagsets are complete and combined, and that the tables are read-only."""
    assert len(PENN) == 36  # noqa: PLR2004
    assert len(CHINESE) == 28  # noqa: PLR2004
    assert DESCRIPTIONS.keys() == PENN.keys() | CHINESE.keys()
    with pytest.raises(TypeError):
        DESCRIPTIONS["NN"] = "Something else"  # type: ignore[index]
