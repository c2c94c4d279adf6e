"""Data loading utilities for the feature explorer.

Reads the ``features.json`` document (a mapping of feature id to embedding,
description and labels) from disk or over HTTP and normalizes it into
:class:`~feature_explorer.records.PointRecord` lists.  Loading never raises:
failures are logged and produce an empty list.
"""

from __future__ import annotations

import json
import math
import re
from numbers import Real
from pathlib import Path
from typing import Any, Iterable, Mapping

import httpx
import pandas as pd
from loguru import logger

from .categories import DEFAULT_CATALOG, CategoryCatalog
from .records import PointRecord

DEFAULT_TIMEOUT = 30.0

# canonical decimal integers only: no sign on zero, no leading zeros
_KEY_RE = re.compile(r"0|-?[1-9][0-9]*")


def _is_remote(source: str | Path) -> bool:
    return str(source).startswith(("http://", "https://"))


def _parse_key(key: Any) -> int | None:
    key = str(key)
    if not _KEY_RE.fullmatch(key):
        return None
    try:
        return int(key)
    except ValueError:
        # digit-count limit on int()
        return None


def _parse_embedding(value: Any) -> tuple[float, float] | None:
    """Return the first two coordinates as floats, or None if unusable."""
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        return None
    coords = value[0], value[1]
    # bool is a Real subclass but never a coordinate
    if any(isinstance(c, bool) or not isinstance(c, Real) for c in coords):
        return None
    try:
        x, y = float(coords[0]), float(coords[1])
    except (OverflowError, ValueError):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return x, y


def _parse_labels(value: Any) -> tuple[int, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(
        int(v) for v in value
        if isinstance(v, int) and not isinstance(v, bool)
    )


def normalize_features(raw: Any) -> list[PointRecord]:
    """Convert a decoded ``features.json`` document into point records.

    Records keep the document's key order.  A key that is not a canonical
    decimal integer (``"01"``, ``" 1"`` and ``"1_0"`` are rejected), a key
    repeating an index already seen, or a record whose ``embedding`` is
    missing or non-numeric, is excluded; the rest of the document still
    loads.

    Parameters
    ----------
    raw : Mapping
        Decoded JSON object mapping ``"<index>"`` to
        ``{"embedding": [x, y], "description": str, "labels": [int, ...]}``.

    Returns
    -------
    list[PointRecord]
    """
    if not isinstance(raw, Mapping):
        logger.error(
            "Feature document must be a JSON object, got {}", type(raw).__name__
        )
        return []

    points: list[PointRecord] = []
    bad_keys: list[str] = []
    seen: set[int] = set()
    for key, record in raw.items():
        index = _parse_key(key)
        if index is None or index in seen:
            bad_keys.append(repr(key))
            continue
        seen.add(index)
        if not isinstance(record, Mapping):
            logger.warning("Skipping feature {}: record is not an object", index)
            continue

        coords = _parse_embedding(record.get("embedding"))
        if coords is None:
            logger.warning(
                "Skipping feature {}: malformed embedding {!r}",
                index, record.get("embedding"),
            )
            continue

        description = record.get("description")
        points.append(PointRecord(
            index=index,
            x=coords[0],
            y=coords[1],
            description="" if description is None else str(description),
            labels=_parse_labels(record.get("labels")),
        ))

    if bad_keys:
        logger.error(
            "Excluded {} feature(s) with non-integer or duplicate keys: {}",
            len(bad_keys), ", ".join(bad_keys[:10]),
        )
    return points


def load_points(
    source: str | Path,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> list[PointRecord]:
    """Fetch and normalize a feature document.

    Parameters
    ----------
    source : str or Path
        ``http(s)://`` URL or local file path.
    timeout : float
        HTTP timeout in seconds (remote sources only).
    client : httpx.Client, optional
        Client to use instead of a throwaway one.

    Returns
    -------
    list[PointRecord]
        Empty when the document cannot be fetched or decoded.
    """
    try:
        if _is_remote(source):
            if client is not None:
                response = client.get(str(source))
            else:
                with httpx.Client(timeout=timeout, follow_redirects=True) as c:
                    response = c.get(str(source))
            response.raise_for_status()
            raw = response.json()
        else:
            raw = json.loads(Path(source).read_text(encoding="utf-8"))
    except (httpx.HTTPError, OSError, ValueError) as exc:
        logger.error("Error loading features from {}: {}", source, exc)
        return []

    points = normalize_features(raw)
    logger.info("Loaded {} feature point(s) from {}", len(points), source)
    return points


async def aload_points(
    source: str | Path,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> list[PointRecord]:
    """Async counterpart of :func:`load_points`."""
    try:
        if _is_remote(source):
            if client is not None:
                response = await client.get(str(source))
            else:
                async with httpx.AsyncClient(
                    timeout=timeout, follow_redirects=True
                ) as c:
                    response = await c.get(str(source))
            response.raise_for_status()
            raw = response.json()
        else:
            raw = json.loads(Path(source).read_text(encoding="utf-8"))
    except (httpx.HTTPError, OSError, ValueError) as exc:
        logger.error("Error loading features from {}: {}", source, exc)
        return []

    points = normalize_features(raw)
    logger.info("Loaded {} feature point(s) from {}", len(points), source)
    return points


def points_to_frame(points: Iterable[PointRecord]) -> pd.DataFrame:
    """Tabulate points, one row per record in list order."""
    rows = [
        {
            "index": p.index,
            "x": p.x,
            "y": p.y,
            "description": p.description,
            "labels": list(p.labels),
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=["index", "x", "y", "description", "labels"])


def export_points_csv(
    points: Iterable[PointRecord],
    path: str | Path,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
) -> pd.DataFrame:
    """Write the normalized point table, with category names, to CSV.

    Unknown label ids are left out of the ``categories`` column.
    """
    df = points_to_frame(points)
    df["categories"] = ["; ".join(catalog.names_for(lbls)) for lbls in df["labels"]]
    df["labels"] = [" ".join(str(l) for l in lbls) for lbls in df["labels"]]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("Wrote {} row(s) to {}", len(df), path)
    return df
