import dataclasses

import pytest

from tradematch.models import Category, ServiceProvider, normalize_rating


@pytest.mark.parametrize(
    "raw, expected",
    [
        (4.5, 4.5),
        (4, 4.0),
        ("4.7", 4.7),
        (" 3.9 ", 3.9),
        ("n/a", 0.0),
        ("", 0.0),
        (None, 0.0),
        (True, 0.0),
        (float("nan"), 0.0),
    ],
)
def test_normalize_rating(raw, expected):
    assert normalize_rating(raw) == expected


def test_category_parse_unknown_is_general():
    assert Category.parse("Plumbing") is Category.PLUMBING
    assert Category.parse(Category.CARPENTRY) is Category.CARPENTRY
    assert Category.parse("roofing") is Category.GENERAL
    assert Category.parse(None) is Category.GENERAL


def test_service_provider_from_dict_normalizes_and_serializes():
    provider = ServiceProvider.from_dict(
        {"name": " Acme ", "specialty": "electrical", "rating": "4.2", "location": "Oakland, CA", "contact": None}
    )

    assert provider.name == "Acme"
    assert provider.rating == 4.2
    assert provider.contact == ""
    assert provider.to_dict() == {
        "name": "Acme",
        "specialty": "electrical",
        "rating": 4.2,
        "location": "Oakland, CA",
        "description": "",
        "contact": "",
        "website": "",
    }


def test_service_provider_is_immutable():
    provider = ServiceProvider.from_dict({"name": "Acme", "rating": 4})
    with pytest.raises(dataclasses.FrozenInstanceError):
        provider.rating = 5.0
