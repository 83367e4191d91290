"""Homophone-group lookup backed by a word list.

Source format: one group per line, words separated by a delimiter (comma by
default), e.g.

    to, two, too
    there, their, they're

The index is built once in memory and is read-only afterwards, so a single
instance can be shared between threads.
"""

import csv
from collections import defaultdict
from pathlib import Path
from typing import Iterable, Optional, Union

from phonlev.config import Settings, get_settings
from phonlev.core.types import EMPTY_GROUP, HomophoneGroup
from phonlev.errors import HomophoneSourceError
from phonlev.observ import get_logger, timer

logger = get_logger(__name__)


class NullHomophoneLookup:
    """Lookup used when no homophone source is available."""

    def lookup(self, word: str) -> HomophoneGroup:
        return EMPTY_GROUP

    def __len__(self) -> int:
        return 0


class HomophoneIndex:
    """In-memory map from word to its homophone group.

    A word listed in several groups maps to their union.
    """

    def __init__(self, groups: Iterable[Iterable[str]]):
        members: dict[str, set[str]] = defaultdict(set)
        group_count = 0

        for group in groups:
            words = {word.strip() for word in group if word and word.strip()}
            if len(words) < 2:
                continue
            group_count += 1
            for word in words:
                members[word].update(words)

        self._groups: dict[str, HomophoneGroup] = {
            word: frozenset(words) for word, words in members.items()
        }
        self._group_count = group_count

    @classmethod
    def from_lines(cls, lines: Iterable[str], delimiter: str = ",") -> "HomophoneIndex":
        """Parse delimited lines; blank lines and '#' comments are skipped."""
        content = (
            line for line in lines
            if line.strip() and not line.lstrip().startswith("#")
        )
        reader = csv.reader(content, delimiter=delimiter, skipinitialspace=True)
        return cls(reader)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        delimiter: str = ","
    ) -> "HomophoneIndex":
        """Load a word list from disk.

        Raises:
            HomophoneSourceError: File is missing or unreadable
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return cls.from_lines(f, delimiter=delimiter)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise HomophoneSourceError(str(path), str(e)) from e

    @property
    def group_count(self) -> int:
        return self._group_count

    def lookup(self, word: str) -> HomophoneGroup:
        return self._groups.get(word, EMPTY_GROUP)

    def __contains__(self, word: object) -> bool:
        return word in self._groups

    def __len__(self) -> int:
        return len(self._groups)


def load_homophone_lookup(
    settings: Optional[Settings] = None
) -> Union[HomophoneIndex, NullHomophoneLookup]:
    """Build the configured homophone lookup.

    Never raises: a missing or unreadable source yields a lookup that finds
    no groups.
    """
    settings = settings or get_settings()

    if not settings.has_homophone_source:
        logger.info("homophone_source_not_configured")
        return NullHomophoneLookup()

    path = settings.homophones_path
    try:
        with timer(logger, "homophone_index_load", path=str(path)):
            index = HomophoneIndex.from_file(path, delimiter=settings.homophones_delimiter)
    except HomophoneSourceError as e:
        logger.warning(
            "homophone_source_unavailable",
            path=str(path),
            error=e.message,
            fallback="no_homophones"
        )
        return NullHomophoneLookup()

    logger.info("homophone_index_built", words=len(index), groups=index.group_count)
    return index
