"""
JSON corpus persistence.

Loads and saves the whole corpus snapshot (sources, chunks, vectors and
index identity) as one JSON document. Saves are all-or-nothing: the
document is written to a temp file in the same directory and renamed over
the previous one.

Dependencies: pydantic
System role: Persisted state collaborator
"""

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from distill.models.corpus import CorpusState

logger = logging.getLogger(__name__)


class JsonStateStore:
    """File-backed corpus snapshot store."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> CorpusState:
        """
        Load the corpus snapshot.

        A missing file yields an empty corpus. An unreadable file is logged
        and also yields an empty corpus; it is left in place untouched until
        the next save.

        Returns:
            CorpusState: Persisted corpus
        """
        if not self.path.exists():
            logger.info(f"{__name__}:load - No state at {self.path}, starting empty")
            return CorpusState()
        try:
            state = CorpusState.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, PydanticValidationError) as e:
            logger.error(
                f"{__name__}:load - Could not read state at {self.path}: {e}",
                extra={"path": str(self.path)},
            )
            return CorpusState()
        logger.info(
            f"{__name__}:load - Loaded {len(state.sources)} sources",
            extra={"path": str(self.path), "index": state.index.model_dump() if state.index else None},
        )
        return state

    def save(self, state: CorpusState) -> None:
        """
        Persist the corpus snapshot atomically.

        Args:
            state: Corpus to write
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = state.model_dump_json(indent=2)

        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".state_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug(f"{__name__}:save - Saved {len(state.sources)} sources to {self.path}")
