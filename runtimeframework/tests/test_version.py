import pytest
from runtimeframework.core.errors import FrameworkFormatError, InvalidArgumentError
from runtimeframework.core.version import UNSPECIFIED, Version, versions_match, compare_versions

def test_parse_keeps_supplied_components_only():
    v = Version.parse("4.5")
    assert v.as_tuple() == (4, 5, UNSPECIFIED, UNSPECIFIED)
    assert str(v) == "4.5"
    assert str(Version.parse("4.5.1")) == "4.5.1"
    assert str(Version.parse("1.2.3.4")) == "1.2.3.4"
    assert str(Version.parse("4")) == "4"

@pytest.mark.parametrize("text", ["", "4.", ".5", "a.b", "4.5.1.2.3", "4.-1", "v4.5", "4.5 beta", "+4.5"])
def test_parse_rejects_malformed(text):
    with pytest.raises(FrameworkFormatError):
        Version.parse(text)

def test_constructor_rejects_gaps_and_negatives():
    with pytest.raises(InvalidArgumentError):
        Version(4, UNSPECIFIED, 1)
    with pytest.raises(InvalidArgumentError):
        Version(4, -2)
    with pytest.raises(InvalidArgumentError):
        Version(UNSPECIFIED)

def test_ordering_treats_unspecified_as_lowest():
    assert Version(4, 5) < Version(4, 5, 0)
    assert Version(4, 5, 2) < Version(4, 6)
    assert Version(2, 0) < Version(4, 0)
    assert Version(4, 0) >= Version(2, 0)
    assert Version(4, 5) == Version.parse("4.5")
    assert Version(4, 5) != Version(4, 5, 0)
    assert compare_versions(Version(4, 5), Version(4, 5, 0)) == -1
    assert compare_versions(Version(4, 5), Version(4, 5)) == 0
    assert compare_versions(Version(4, 6), Version(4, 5, 2)) == 1

def test_matching_ignores_unspecified_build_and_revision():
    assert versions_match(Version(4, 0, 30319), Version(4, 0))
    assert versions_match(Version(4, 0), Version(4, 0, 30319, 42000))
    assert versions_match(Version(4, 0, 30319, 42000), Version(4, 0, 30319))
    assert not versions_match(Version(4, 0, 30319), Version(4, 0, 30318))
    assert not versions_match(Version(4, 0, 30319, 1), Version(4, 0, 30319, 2))
    assert not versions_match(Version(2, 0, 50727), Version(4, 0, 30319))

def test_matching_and_ordering_disagree_on_unspecified():
    a, b = Version(4, 0), Version(4, 0, 30319)
    assert versions_match(a, b)
    assert a < b
