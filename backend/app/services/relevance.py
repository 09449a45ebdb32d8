"""
Topic relevance filter over a local documentation corpus.

Given the raw text of a corpus, an optional partition key and a topic, select
the part of the text relevant to the topic and cap it at a fixed length:

  1. partition selection (multiplexed corpora only)
  2. "overview" returns the working text as-is
  3. every section containing the topic, in source order
  4. otherwise every paragraph containing the topic, under a results header
  5. otherwise the whole working text

Matching is a case-insensitive literal substring test. Nothing is ranked,
cached or indexed; each call is a pure function of its inputs.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from backend.app.services.chunk_utils import split_into_paragraphs, split_into_sections

OVERVIEW_TOPIC = "overview"
MAX_EXCERPT_LENGTH = 8000
TRUNCATION_NOTICE = "\n\n[Content truncated. Full documentation available {where}]"


class MatchKind(str, Enum):
    OVERVIEW = "overview"
    SECTIONS = "sections"
    PARAGRAPHS = "paragraphs"
    NO_MATCH = "no_match"
    REMOTE = "remote"


@dataclass(frozen=True)
class PartitionScheme:
    """Two documentation sets sharing one file, split at a sentinel heading."""
    sentinel: str
    first: str
    second: str

    def is_second(self, key: Optional[str]) -> bool:
        # Anything but the second key, None included, means the first partition.
        return key == self.second


@dataclass(frozen=True)
class Excerpt:
    text: str
    truncated: bool
    match: MatchKind


def select_partition(corpus: str, scheme: PartitionScheme, key: Optional[str]) -> str:
    """Text before the sentinel for the first partition, from the sentinel on for the second."""
    idx = corpus.find(scheme.sentinel)
    if idx == -1:
        return corpus
    return corpus[idx:] if scheme.is_second(key) else corpus[:idx]


def matching_sections(text: str, topic: str) -> List[str]:
    needle = topic.lower()
    return [s.text for s in split_into_sections(text) if needle in s.text.lower()]


def matching_paragraphs(text: str, topic: str) -> List[str]:
    needle = topic.lower()
    return [p for p in split_into_paragraphs(text) if needle in p.lower()]


def search_results_header(topic: str, partition: Optional[str] = None) -> str:
    header = f'# Search Results for "{topic}"'
    if partition:
        header += f" in {partition}"
    return header


def truncate(text: str, where: str, max_length: int = MAX_EXCERPT_LENGTH) -> tuple[str, bool]:
    """Hard cut at max_length characters, then append the notice naming `where`."""
    if len(text) <= max_length:
        return text, False
    return text[:max_length] + TRUNCATION_NOTICE.format(where=where), True


class RelevanceFilter:
    """
    Relevance filter bound to one documentation set.

    Args:
        source: where the full content lives, used in the truncation notice
            (e.g. "in Tauri docs").
        scheme: partition layout for multiplexed corpora, None otherwise.
        max_length: character ceiling applied to the selection.
    """

    def __init__(self, source: str, scheme: Optional[PartitionScheme] = None,
                 max_length: int = MAX_EXCERPT_LENGTH):
        self.source = source
        self.scheme = scheme
        self.max_length = max_length

    def _where(self, partition: Optional[str]) -> str:
        if self.scheme is not None:
            return f"in {partition or self.scheme.first} docs"
        return self.source

    def select(self, corpus: str, partition_key: Optional[str] = None,
               topic: str = OVERVIEW_TOPIC) -> Excerpt:
        working = corpus
        partition = None
        if self.scheme is not None:
            partition = self.scheme.second if self.scheme.is_second(partition_key) else self.scheme.first
            working = select_partition(corpus, self.scheme, partition)

        selection, match = self._select_topic(working, topic, partition)
        text, truncated = truncate(selection, self._where(partition), self.max_length)
        return Excerpt(text=text, truncated=truncated, match=match)

    def _select_topic(self, working: str, topic: str,
                      partition: Optional[str]) -> tuple[str, MatchKind]:
        if topic == OVERVIEW_TOPIC:
            return working, MatchKind.OVERVIEW

        sections = matching_sections(working, topic)
        if sections:
            return "\n\n".join(sections), MatchKind.SECTIONS

        paragraphs = matching_paragraphs(working, topic)
        if paragraphs:
            header = search_results_header(topic, partition)
            return header + "\n\n" + "\n\n".join(paragraphs), MatchKind.PARAGRAPHS

        return working, MatchKind.NO_MATCH


def select(corpus: str, partition_key: Optional[str], topic: str,
           scheme: Optional[PartitionScheme] = None, source: str = "in the docs",
           max_length: int = MAX_EXCERPT_LENGTH) -> Excerpt:
    """Functional form of RelevanceFilter.select."""
    return RelevanceFilter(source, scheme, max_length).select(corpus, partition_key, topic)
