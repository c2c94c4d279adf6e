"""Static catalog of clinical finding categories used to filter features."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Category:
    """A hand-curated concept a feature may correlate with."""

    id: int
    name: str


class CategoryCatalog:
    """Ordered, immutable collection of :class:`Category` entries.

    Label ids found on points are only meaningful when they appear here;
    every lookup silently ignores ids the catalog does not know.
    """

    def __init__(self, categories: Iterable[Category]) -> None:
        self._categories: tuple[Category, ...] = tuple(categories)
        self._by_id: dict[int, Category] = {}
        for category in self._categories:
            if category.id in self._by_id:
                raise ValueError(f"Duplicate category id {category.id}")
            self._by_id[category.id] = category

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    @property
    def ids(self) -> frozenset[int]:
        """Set of valid category ids."""
        return frozenset(self._by_id)

    def get(self, category_id: int | None) -> Category | None:
        if category_id is None:
            return None
        return self._by_id.get(category_id)

    def name_of(self, category_id: int | None) -> str | None:
        category = self.get(category_id)
        return category.name if category is not None else None

    def valid_labels(self, labels: Sequence[int]) -> list[int]:
        """Return *labels* restricted to catalog ids, keeping their order."""
        return [label for label in labels if label in self._by_id]

    def names_for(self, labels: Sequence[int]) -> list[str]:
        """Human-readable names of the valid labels in *labels*."""
        return [self._by_id[label].name for label in self.valid_labels(labels)]


# Chest X-ray findings
DEFAULT_CATALOG = CategoryCatalog([
    Category(0, "Pacemaker"),
    Category(1, "COPD"),
    Category(2, "Cardiomegaly"),
    Category(3, "Pleural Effusion"),
    Category(4, "Pneumothorax"),
    Category(5, "Consolidation"),
    Category(6, "Atelectasis"),
    Category(7, "Pulmonary Edema"),
    Category(8, "Lung Nodule"),
    Category(9, "Lung Mass"),
    Category(10, "Hiatus Hernia"),
    Category(11, "Rib Fracture"),
    Category(12, "Sternotomy Wires"),
    Category(13, "Endotracheal Tube"),
    Category(14, "Nasogastric Tube"),
    Category(15, "Central Venous Catheter"),
    Category(16, "Chest Drain"),
    Category(17, "Aortic Unfolding"),
    Category(18, "Scoliosis"),
    Category(19, "Lateral View"),
    Category(20, "Pediatric"),
    Category(21, "Text Annotation"),
])
