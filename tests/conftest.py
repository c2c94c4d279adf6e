import pytest

from feature_explorer.categories import Category, CategoryCatalog
from feature_explorer.records import PointRecord


@pytest.fixture
def catalog():
    return CategoryCatalog([
        Category(1, "Pacemaker"),
        Category(2, "COPD"),
        Category(3, "Cardiomegaly"),
    ])


@pytest.fixture
def points():
    return [
        PointRecord(index=10, x=0.0, y=0.0, description="pacemaker leads", labels=(1, 999)),
        PointRecord(index=11, x=10.0, y=10.0, description="hyperinflated lungs", labels=(2,)),
        PointRecord(index=12, x=5.0, y=-3.0, description="noise only", labels=(999,)),
        PointRecord(index=13, x=-2.0, y=4.0, description="no labels"),
    ]


@pytest.fixture
def raw_document():
    return {
        "0": {"embedding": [1.5, -2.0], "description": "Pacemaker wires", "labels": [1]},
        "7": {"embedding": [3.0, 4.0], "description": "Flattened diaphragm"},
        "3": {"embedding": [0, 0], "description": "Lateral view", "labels": []},
    }
