"""Item source loading.

Reads the item list files given on the command line. Plain lists hold one
identifier per line; the registry file is a headerless CSV with the
columns Path, Name, Type, Value.
"""

import codecs
import csv
import io
import locale
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from wincfg.models.category import ItemCategory
from wincfg.models.registry import RegistryRow

logger = logging.getLogger(__name__)

_REGISTRY_COLUMNS = 4
_REGISTRY_HEADER = ("path", "name", "type")


class ItemSourceError(Exception):
    """Raised when a supplied item source file cannot be read."""


@dataclass(frozen=True, slots=True)
class ItemSources:
    """Item source file per category; None when not supplied."""

    winget: Path | None = None
    capability: Path | None = None
    optional_feature: Path | None = None
    package: Path | None = None
    provisioned_package: Path | None = None
    registry: Path | None = None

    def path_for(self, category: ItemCategory) -> Path | None:
        """Return the source file for a category, if any."""
        return getattr(self, category.name.lower())

    @property
    def supplied(self) -> list[ItemCategory]:
        """Return the categories that have a source file."""
        return [category for category in ItemCategory if self.path_for(category) is not None]

    @property
    def is_empty(self) -> bool:
        """Check if no source file was supplied at all."""
        return all(getattr(self, f.name) is None for f in fields(self))


# UTF-32 marks first: BOM_UTF32_LE starts with BOM_UTF16_LE
_BYTE_ORDER_MARKS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def _decode(data: bytes) -> str:
    """Decode file content written by common Windows tools.

    A byte order mark selects UTF-8, UTF-16 or UTF-32. Without one the
    content is read as UTF-8, falling back to the locale's ANSI code page.
    """
    for mark, encoding in _BYTE_ORDER_MARKS:
        if data.startswith(mark):
            return data.decode(encoding)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        fallback = locale.getpreferredencoding(False)
        logger.debug("Content is not UTF-8, decoding as %s", fallback)
        return data.decode(fallback)


def _read_text(path: Path) -> str:
    """Read a source file and decode it.

    Raises:
        ItemSourceError: If the file cannot be read or decoded.
    """
    try:
        return _decode(path.read_bytes())
    except (OSError, UnicodeDecodeError, LookupError) as e:
        msg = f"Cannot read item file {path}: {e}"
        raise ItemSourceError(msg) from e


def read_item_list(path: Path) -> list[str]:
    """Read one identifier per non-empty line.

    Lines starting with '#' are comments.

    Args:
        path: Item list file.

    Returns:
        Identifiers in file order.

    Raises:
        ItemSourceError: If the file cannot be read.
    """
    items: list[str] = []
    for line in _read_text(path).splitlines():
        item = line.strip()
        if item and not item.startswith("#"):
            items.append(item)
    logger.debug("Read %d item(s) from %s", len(items), path)
    return items


def read_registry_rows(path: Path) -> list[RegistryRow]:
    """Read registry rows from a headerless CSV file.

    A leading 'Path,Name,Type,...' header row is skipped. Short rows are
    padded with empty fields so they fail validation as a single item.

    Args:
        path: Registry CSV file.

    Returns:
        Rows in file order.

    Raises:
        ItemSourceError: If the file cannot be read or parsed.
    """
    text = _read_text(path)
    rows: list[RegistryRow] = []

    try:
        records = list(csv.reader(io.StringIO(text)))
    except csv.Error as e:
        msg = f"Cannot parse registry file {path}: {e}"
        raise ItemSourceError(msg) from e

    for index, record in enumerate(records):
        if not any(cell.strip() for cell in record):
            continue
        if index == 0 and tuple(c.strip().lower() for c in record[:3]) == _REGISTRY_HEADER:
            continue
        cells = (record + [""] * _REGISTRY_COLUMNS)[:_REGISTRY_COLUMNS]
        if len(record) > _REGISTRY_COLUMNS:
            logger.warning("Extra columns ignored in %s row %d", path, index + 1)
        rows.append(RegistryRow(path=cells[0], name=cells[1], type=cells[2], value=cells[3]))

    logger.debug("Read %d registry row(s) from %s", len(rows), path)
    return rows


def load_sources(sources: ItemSources) -> dict[ItemCategory, list[object]]:
    """Load every supplied item source.

    Args:
        sources: Source file per category.

    Returns:
        Items per category, in category order; [] for categories
        without a source file.

    Raises:
        ItemSourceError: If any supplied file cannot be read.
    """
    items: dict[ItemCategory, list[object]] = {}
    for category in ItemCategory:
        path = sources.path_for(category)
        if path is None:
            items[category] = []
        elif category == ItemCategory.REGISTRY:
            items[category] = list(read_registry_rows(path))
        else:
            items[category] = list(read_item_list(path))
    return items
