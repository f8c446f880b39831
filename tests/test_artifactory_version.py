import pytest

from bintray_push.modules.pushtobintray.domain import ArtifactoryVersion


def test_components_compare_numerically():
    assert ArtifactoryVersion.parse("3.10") > ArtifactoryVersion.parse("3.6")
    assert ArtifactoryVersion.parse("3.6.0") == ArtifactoryVersion.parse("3.6")


@pytest.mark.parametrize(
    "reported, expected",
    [("3.5.2", False), ("3.6", True), ("3.6.1", True), ("4.0", True), ("2.9.9", False)],
)
def test_is_at_least_minimum(reported, expected):
    minimum = ArtifactoryVersion.parse("3.6")
    assert ArtifactoryVersion.parse(reported).is_at_least(minimum) is expected


def test_qualifiers_are_ignored():
    assert ArtifactoryVersion.parse("3.6.0-SNAPSHOT").parts == (3, 6, 0)
    assert ArtifactoryVersion.parse("4.1.rc1").parts == (4, 1)


def test_development_version_passes_every_gate():
    dev = ArtifactoryVersion.parse("${project.version}")
    assert dev.development
    assert dev.is_at_least(ArtifactoryVersion.parse("99.0"))
    assert not ArtifactoryVersion.parse("99.0").is_at_least(dev)


@pytest.mark.parametrize("value", ["", "   ", "latest"])
def test_malformed_versions_raise(value):
    with pytest.raises(ValueError):
        ArtifactoryVersion.parse(value)
