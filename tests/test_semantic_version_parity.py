"""Cross-check strict SemVer strings against the semantic_version library."""

import pytest
import semantic_version

from semcheck.versioning import Condition, Version

STRICT_VERSIONS = [
    "0.0.0",
    "1.2.3",
    "10.20.30",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-0.3.7",
    "1.0.0-x.7.z.92",
    "1.0.0-x-y-z.rc-1",
    "1.0.0-alpha.beta.--.omega",
    "1.0.0+20130313144700",
    "1.0.0-beta+exp.sha.5114f85",
    "1.0.0+21AF26D3-117B344092BD",
    "4294967295.0.0",
    "1.0.0-rc.7+build.001",
    "1.0.0+exp.0050",
]


@pytest.mark.parametrize("text", STRICT_VERSIONS)
def test_fields_match_semantic_version(text):
    """Core numbers and identifiers agree with semantic_version."""
    ours = Version.parse(text)
    reference = semantic_version.Version(text)
    assert (ours.major, ours.minor, ours.patch) == (reference.major, reference.minor, reference.patch)
    assert ours.pre_release == tuple(reference.prerelease)
    assert ours.metadata == tuple(reference.build)


@pytest.mark.parametrize("text", STRICT_VERSIONS)
def test_display_matches_semantic_version(text):
    """Display output is the canonical SemVer rendering."""
    assert str(Version.parse(text)) == str(semantic_version.Version(text))


@pytest.mark.parametrize("condition,candidates", [
    (">=1.2.3 <2.0.0", ["1.2.2", "1.2.3", "1.9.9", "2.0.0", "3.0.0"]),
    (">1.0.0 <=1.5.0", ["1.0.0", "1.0.1", "1.5.0", "1.5.1"]),
    ("~1.2.3", ["1.2.2", "1.2.3", "1.2.99", "1.3.0"]),
    ("^1.2.3", ["1.2.2", "1.2.3", "1.99.0", "2.0.0"]),
])
def test_release_ranges_agree_with_npm_spec(condition, candidates):
    """For release versions (no pre-release), range verdicts agree with NpmSpec."""
    reference = semantic_version.NpmSpec(condition)
    ours = Condition.parse(condition)
    for candidate in candidates:
        assert ours.compare(candidate) == reference.match(semantic_version.Version(candidate)), candidate
