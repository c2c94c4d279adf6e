import pytest

from feature_explorer.categories import DEFAULT_CATALOG, Category, CategoryCatalog


def test_valid_labels_drop_unknown_ids(catalog):
    assert catalog.valid_labels([3, 999, 1, -4]) == [3, 1]


def test_names_for_labels(catalog):
    assert catalog.names_for([2, 999]) == ["COPD"]
    assert catalog.names_for([]) == []


def test_lookup(catalog):
    assert catalog.name_of(1) == "Pacemaker"
    assert catalog.name_of(999) is None
    assert catalog.name_of(None) is None
    assert 2 in catalog
    assert 999 not in catalog
    assert catalog.ids == frozenset({1, 2, 3})


def test_keeps_order(catalog):
    assert [c.name for c in catalog] == ["Pacemaker", "COPD", "Cardiomegaly"]
    assert len(catalog) == 3


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        CategoryCatalog([Category(1, "a"), Category(1, "b")])


def test_default_catalog_contains_clinical_findings():
    names = {c.name for c in DEFAULT_CATALOG}
    assert {"Pacemaker", "COPD"} <= names
