# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Frequency dictionaries: term -> count mappings the speller scans"""
from __future__ import annotations

from .session import get_requests_session
from requests import Session
from typing import Final, Iterable, Iterator, Protocol, TextIO

import logging
import os
import re

MAX_FREQUENCY: Final = 2**63 - 1

# a word in any language, apostrophes allowed, hyphenated parts kept together ("tick-tock")
WORD_RE = re.compile(r"[^\W\d_](?:[^\W\d_]|')*(?:-[^\W\d_]+)*")

log = logging.getLogger("linspell.dictionary")


class DictionaryError(Exception):
    """Dictionary could not be loaded"""


class DictionaryProvider(Protocol):
    def lookup_exact(self, term: str) -> int | None:
        ...

    def iter_entries(self) -> Iterable[tuple[str, int]]:
        ...


class FrequencyDictionary(dict):
    """In-memory dictionary of term frequencies

    Terms are case sensitive. Counts never exceed MAX_FREQUENCY.
    """

    def lookup_exact(self, term: str) -> int | None:
        return self.get(term)

    def iter_entries(self) -> Iterator[tuple[str, int]]:
        return iter(self.items())

    def add(self, term: str, count: int) -> None:
        """Set the count of a term, replacing any earlier one"""
        self[term] = min(MAX_FREQUENCY, count)

    def increment(self, term: str, count: int = 1) -> None:
        self[term] = min(MAX_FREQUENCY, self.get(term, 0) + count)

    @property
    def max_length(self) -> int:
        return max((len(term) for term in self), default=0)

    @property
    def total_frequency(self) -> int:
        return sum(self.values())


def parse_words(text: str) -> list[str]:
    return WORD_RE.findall(text)


def load_frequencies(
    lines: Iterable[str],
    term_index: int = 0,
    count_index: int = 1,
    separator: str | None = None,
    dictionary: FrequencyDictionary | None = None,
) -> FrequencyDictionary:
    """Read `term count` lines into a dictionary

    Columns are split on `separator`, or on runs of whitespace when it is None.
    Lines without enough columns or with a count that is not a non-negative
    integer are skipped.
    """
    if dictionary is None:
        dictionary = FrequencyDictionary()
    min_columns = max(term_index, count_index) + 1
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        parts = line.strip().split(separator)
        if len(parts) < min_columns or not parts[term_index]:
            skipped += 1
            continue
        try:
            count = int(parts[count_index])
        except ValueError:
            count = -1
        if count < 0:
            log.debug("line %d: invalid count %r", line_number, parts[count_index])
            skipped += 1
            continue
        dictionary.add(parts[term_index], count)
    if skipped:
        log.info("skipped %d malformed dictionary lines", skipped)
    return dictionary


def build_from_corpus(lines: Iterable[str], dictionary: FrequencyDictionary | None = None) -> FrequencyDictionary:
    """Count every word of a text corpus"""
    if dictionary is None:
        dictionary = FrequencyDictionary()
    for line in lines:
        for word in parse_words(line):
            dictionary.increment(word)
    return dictionary


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_lines(url: str, session: Session | None, timeout: int | None) -> Iterator[str]:
    if session is None:
        session = get_requests_session(timeout=timeout)
    log.debug("fetching dictionary from %r", url)
    with session.get(url, stream=True) as response:
        if not str(response.status_code).startswith("2"):
            raise DictionaryError(f"Failed to fetch {url!r}: {response.status_code} {response.reason}")
        if response.encoding is None:
            response.encoding = "utf-8"
        yield from response.iter_lines(decode_unicode=True)


def _read_lines(path: str) -> Iterator[str]:
    if not os.path.isfile(path):
        raise DictionaryError(f"Dictionary file not found: {path!r}")
    with open(path, encoding="utf-8") as fp:
        yield from fp


def load_dictionary(
    source: str,
    term_index: int = 0,
    count_index: int = 1,
    corpus: bool = False,
    session: Session | None = None,
    timeout: int | None = None,
) -> FrequencyDictionary:
    """Load a dictionary from a file path or an http(s) URL

    With `corpus` set the source is raw text and word counts are built from it,
    otherwise it is read as delimited term/count columns.
    """
    lines = _fetch_lines(source, session, timeout) if is_url(source) else _read_lines(source)
    if corpus:
        dictionary = build_from_corpus(lines)
    else:
        dictionary = load_frequencies(lines, term_index=term_index, count_index=count_index)
    log.info("loaded %d terms from %s", len(dictionary), source)
    return dictionary


def save_frequencies(dictionary: FrequencyDictionary, fp: TextIO) -> None:
    """Write `term count` lines, most frequent first"""
    for term, count in sorted(dictionary.items(), key=lambda item: (-item[1], item[0])):
        fp.write(f"{term} {count}\n")
