import logging
from dataclasses import dataclass
from typing import Dict, Optional

from backend.app.services.exceptions import ReadError
from backend.app.services.relevance import PartitionScheme
from shared.config import Settings

SVELTEKIT_SENTINEL = "# Start of SvelteKit documentation"

SVELTE_PARTITIONS = PartitionScheme(
    sentinel=SVELTEKIT_SENTINEL, first="svelte", second="sveltekit"
)


@dataclass(frozen=True)
class DocSet:
    name: str
    label: str
    path: str
    scheme: Optional[PartitionScheme] = None


def default_doc_sets(settings: Settings) -> Dict[str, DocSet]:
    return {
        "tauri": DocSet(name="tauri", label="Tauri", path=settings.tauri_docs_path),
        "svelte": DocSet(
            name="svelte", label="Svelte", path=settings.svelte_docs_path, scheme=SVELTE_PARTITIONS
        ),
    }


class CorpusLoader:
    """Reads a whole documentation file on every call; nothing is cached."""

    def __init__(self, doc_sets: Dict[str, DocSet], logger: Optional[logging.Logger] = None):
        self.doc_sets = doc_sets
        self.logger = logger or logging.getLogger(__name__)

    def doc_set(self, name: str) -> DocSet:
        try:
            return self.doc_sets[name]
        except KeyError:
            raise ReadError(f"Unknown documentation set: {name}") from None

    def load(self, name: str) -> str:
        path = self.doc_set(name).path
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Error reading file: {path} {e}")
            raise ReadError(f"Could not read {path}: {e}") from e
