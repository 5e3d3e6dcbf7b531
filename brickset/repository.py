"""
Load-once, read-only record store backed by a JSON data file.

`Repository` is generic over a Pydantic model: the whole file is validated
into a tuple of model instances when the repository is constructed and the
tuple is never modified afterwards. `LegoSetRepository` binds it to the
Brickset catalog.

Usage:
    from brickset.repository import LegoSetRepository

    repository = LegoSetRepository()
    records = repository.get_all()
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from brickset.config import resolve_data_file
from brickset.domain.models import LegoSet
from brickset.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class RepositoryLoadError(RuntimeError):
    """Raised when the data source is missing, unreadable or malformed."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Failed to load records from '{source}': {reason}")
        self.source = source
        self.reason = reason


def load_records(model: Type[T], source: Path) -> Tuple[T, ...]:
    """
    Read `source` and validate its JSON array into `model` instances.

    Raises
    ------
    RepositoryLoadError
        If the file cannot be read or its content does not map onto `model`.
    """
    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise RepositoryLoadError(source, exc.strerror or str(exc)) from exc

    # Exports may start with a UTF-8 byte order mark.
    raw = raw.removeprefix(codecs.BOM_UTF8)

    adapter = TypeAdapter(List[model])  # type: ignore[valid-type]
    try:
        records = adapter.validate_json(raw)
    except ValidationError as exc:
        raise RepositoryLoadError(
            source, f"{exc.error_count()} validation error(s); first: {exc.errors()[0]['msg']}"
        ) from exc

    return tuple(records)


class Repository(Generic[T]):
    """
    In-memory collection of records of type `T`, loaded once from `source`.

    Record order matches the order in the data file.
    """

    def __init__(self, model: Type[T], source: Path | str) -> None:
        self._model = model
        self._source = Path(source)
        self._records = load_records(model, self._source)
        log.info(
            f"Loaded {len(self._records)} {model.__name__} record(s)",
            extra={"records": len(self._records), "source": str(self._source)},
        )

    @property
    def source(self) -> Path:
        return self._source

    def get_all(self) -> Tuple[T, ...]:
        """Return every record, in source order."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)


class LegoSetRepository(Repository[LegoSet]):
    """Repository of LEGO sets read from the configured Brickset export."""

    def __init__(self, source: Optional[Path | str] = None) -> None:
        super().__init__(LegoSet, source if source is not None else resolve_data_file())


__all__ = ["LegoSetRepository", "Repository", "RepositoryLoadError", "load_records"]
