# responder/corpus.py
# Prompt/response corpus: entries, JSON loading and the read-only snapshot handle

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class CorpusEntry:
    prompt: str
    response: str

    @staticmethod
    def from_record(record: Any) -> Optional["CorpusEntry"]:
        if not isinstance(record, dict):
            return None
        prompt = record.get("prompt")
        response = record.get("response")
        if not isinstance(prompt, str) or not isinstance(response, str):
            return None
        return CorpusEntry(prompt=prompt, response=response)


def load_corpus(path) -> List[CorpusEntry]:
    """
    Read a JSON array of {"prompt", "response"} objects.
    Missing or unreadable files give an empty corpus; bad records are skipped.
    """
    path = Path(path)
    if not path.exists():
        print(f"WARNING: Corpus file not found at {path}")
        return []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"ERROR: Could not read corpus {path}: {e}")
        return []

    if not isinstance(data, list):
        print(f"ERROR: Corpus {path} must be a JSON array of objects.")
        return []

    entries: List[CorpusEntry] = []
    for i, record in enumerate(data):
        entry = CorpusEntry.from_record(record)
        if entry is None:
            print(f"WARNING: Skipping malformed corpus entry #{i}: {record!r}")
            continue
        entries.append(entry)

    print(f"SUCCESS: Loaded {len(entries)} corpus entries.")
    return entries


class CorpusStore:
    """
    Owned handle to the loaded corpus.
    Until data is delivered, `entries` is empty and nothing can match.
    """
    def __init__(self, entries: Optional[Iterable[CorpusEntry]] = None):
        self._entries: Tuple[CorpusEntry, ...] = ()
        self._loaded = False
        if entries is not None:
            self.set_entries(entries)

    @property
    def entries(self) -> Tuple[CorpusEntry, ...]:
        return self._entries

    @property
    def loaded(self) -> bool:
        return self._loaded

    def set_entries(self, entries: Iterable[CorpusEntry]) -> None:
        self._entries = tuple(entries)
        self._loaded = True

    def load(self, path) -> "CorpusStore":
        self.set_entries(load_corpus(path))
        return self

    def __len__(self) -> int:
        return len(self._entries)
