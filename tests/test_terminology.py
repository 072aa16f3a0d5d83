import pytest

from app.clinical.terminology.data import TOOTH_NUMBERING_SYSTEMS
from app.clinical.terminology.service import expand_abbreviation, get_tooth_name
from app.core.errors import InvalidArgumentError


@pytest.mark.parametrize(
    "tooth,name",
    [
        ("1", "Third molar (upper right)"),
        ("8", "Central incisor (upper right)"),
        ("9", "Central incisor (upper left)"),
        ("17", "Third molar (lower left)"),
        ("30", "First molar (lower right)"),
        ("a", "Second molar (upper right primary)"),
        ("K", "Second molar (lower left primary)"),
        ("T", "Second molar (lower right primary)"),
    ],
)
def test_universal_numbering(tooth, name):
    assert get_tooth_name("universal", tooth) == name


@pytest.mark.parametrize(
    "tooth,name",
    [
        ("11", "Central incisor (upper right)"),
        ("18", "Third molar (upper right)"),
        ("36", "First molar (lower left)"),
        ("85", "Second molar (lower right primary)"),
    ],
)
def test_fdi_numbering(tooth, name):
    assert get_tooth_name("FDI", tooth) == name


def test_both_systems_cover_all_teeth():
    for system in TOOTH_NUMBERING_SYSTEMS.values():
        assert len(system["mapping"]) == 52


def test_unknown_tooth():
    assert get_tooth_name("fdi", "19") is None
    assert get_tooth_name("universal", "33") is None


def test_unknown_system():
    with pytest.raises(InvalidArgumentError):
        get_tooth_name("palmer", "1")


def test_abbreviations():
    assert expand_abbreviation("rct") == "Root canal treatment"
    assert expand_abbreviation(" FMX ") == "Full mouth x-rays"
    assert expand_abbreviation("XYZ") is None


def test_tooth_endpoint(client):
    r = client.get("/terminology/teeth/universal/19")
    assert r.status_code == 200
    assert r.json() == {"system": "universal", "tooth": "19", "name": "First molar (lower left)"}


def test_tooth_endpoint_unknown_system_is_bad_request(client):
    r = client.get("/terminology/teeth/palmer/1")
    assert r.status_code == 400


def test_abbreviation_endpoint(client):
    assert client.get("/terminology/abbreviations/srp").json() == {
        "abbreviation": "SRP",
        "meaning": "Scaling and root planing",
    }
    assert client.get("/terminology/abbreviations/zzz").status_code == 404


def test_original_abbreviations_are_kept():
    assert expand_abbreviation("BOE") == "Buccal object evaluation"
    assert expand_abbreviation("cej") == "Cemento-enamel junction"
