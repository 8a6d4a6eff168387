"""JSON catalog loading.

Accepts either a top-level array of spell objects or an object with a
``spells`` array. Entries missing a name or a valid level are skipped with a
warning so one bad record does not hide the rest of the catalog.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from ..errors import CatalogLoadError
from .types import Catalog, Spell

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "spells.json"

_TEXT_FIELDS = ("school", "casting_time", "range", "components", "duration", "higher_levels")


def read_text(path: Path) -> str:
    """Read catalog text, tolerating a UTF-8 byte order mark."""
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("%s is not valid UTF-8; undecodable bytes replaced", path)
        return raw.decode("utf-8", errors="replace")


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return "\n\n".join(str(part) for part in value)
    return str(value)


def _as_flag(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"yes", "true", "1"}
    return bool(value)


def spell_from_mapping(raw: Mapping[str, object]) -> Spell:
    """Build a ``Spell`` from one decoded JSON object.

    ``desc`` is accepted as an alias for ``description`` and ``higher_level``
    for ``higher_levels``; list values are joined into paragraphs.
    Raises ``ValueError`` when ``name`` or ``level`` is missing or invalid.
    """
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("spell entry has no name")
    level = raw.get("level")
    if isinstance(level, bool) or not isinstance(level, int) or level < 0:
        raise ValueError(f"spell {name!r} has invalid level {level!r}")

    fields: dict[str, str] = {}
    for key in _TEXT_FIELDS:
        fields[key] = _as_text(raw.get(key))
    if not fields["higher_levels"]:
        fields["higher_levels"] = _as_text(raw.get("higher_level"))

    description = raw.get("description", raw.get("desc"))
    raw_classes = raw.get("classes") or ()
    if isinstance(raw_classes, str):
        raw_classes = [raw_classes]
    classes = tuple(str(item) for item in raw_classes) if isinstance(raw_classes, (list, tuple)) else ()

    components = raw.get("components")
    if isinstance(components, (list, tuple)):
        fields["components"] = ", ".join(str(part) for part in components)

    return Spell(
        name=name.strip(),
        level=level,
        ritual=_as_flag(raw.get("ritual", False)),
        concentration=_as_flag(raw.get("concentration", False)),
        classes=classes,
        description=_as_text(description),
        **fields,
    )


def parse_catalog(data: object) -> Catalog:
    """Convert decoded JSON into a catalog, preserving source order."""
    if isinstance(data, Mapping):
        data = data.get("spells")
    if not isinstance(data, list):
        raise CatalogLoadError("catalog must be a JSON array or an object with a 'spells' array")

    spells: list[Spell] = []
    for position, raw in enumerate(data):
        if not isinstance(raw, Mapping):
            logger.warning("skipping catalog entry %d: not an object", position)
            continue
        try:
            spells.append(spell_from_mapping(raw))
        except ValueError as exc:
            logger.warning("skipping catalog entry %d: %s", position, exc)
    return tuple(spells)


def load_catalog(path: Path) -> Catalog:
    """Read and parse the catalog file at ``path``."""
    try:
        text = read_text(path)
    except OSError as exc:
        raise CatalogLoadError(f"cannot read {path}: {exc.strerror or exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"{path.name}: invalid JSON at line {exc.lineno}") from exc
    catalog = parse_catalog(data)
    logger.info("parsed %d spells from %s", len(catalog), path)
    return catalog
