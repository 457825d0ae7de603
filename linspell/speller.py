# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Linear-scan spelling correction

Every dictionary term is compared against the input, no index is built.
Length pruning and a shrinking distance budget keep the scan close to
linear in practice for dictionaries of up to a few hundred thousand terms.
"""
from __future__ import annotations

from .dictionary import DictionaryProvider
from .distance import damerau_levenshtein, NOT_WITHIN_BOUND
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import dataclasses
import logging


class LookupCancelled(Exception):
    """Lookup was abandoned by its caller"""


class Verbosity(Enum):
    # up to top_results_limit suggestions of the smallest distance
    TOP = "top"
    # every suggestion of the smallest distance
    CLOSEST = "closest"
    # every suggestion within max_distance, no early termination
    ALL = "all"

    def policy(self, config: LookupConfig) -> SuggestionPolicy:
        if self is Verbosity.TOP:
            return TopPolicy(config)
        elif self is Verbosity.CLOSEST:
            return ClosestPolicy(config)
        elif self is Verbosity.ALL:
            return AllPolicy(config)
        else:
            raise NotImplementedError(self)


@dataclass(eq=False)
class SuggestItem:
    term: str
    distance: int
    frequency: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuggestItem):
            return NotImplemented
        return self.term == other.term

    def __hash__(self) -> int:
        return hash(self.term)

    def sort_key(self) -> tuple[int, int, str]:
        return self.distance, -self.frequency, self.term

    def as_dict(self) -> dict[str, Any]:
        return {"term": self.term, "distance": self.distance, "frequency": self.frequency}


@dataclass(frozen=True)
class LookupConfig:
    max_distance: int = 2
    verbosity: Verbosity = Verbosity.TOP
    top_results_limit: int = 3

    def __post_init__(self) -> None:
        if not isinstance(self.max_distance, int) or self.max_distance < 0:
            raise ValueError(f"max_distance must be a non-negative integer, got {self.max_distance!r}")
        if not isinstance(self.verbosity, Verbosity):
            raise ValueError(f"verbosity must be one of {', '.join(v.value for v in Verbosity)}")
        if not isinstance(self.top_results_limit, int) or self.top_results_limit < 1:
            raise ValueError(f"top_results_limit must be a positive integer, got {self.top_results_limit!r}")


class SuggestionPolicy:
    """Collects the suggestions of one lookup

    Holds only suggestions of the smallest distance seen so far and shrinks
    the distance budget to it.
    """

    exact_shortcut = True

    def __init__(self, config: LookupConfig) -> None:
        self.config = config
        self.budget = config.max_distance
        self.items: list[SuggestItem] = []

    def skip(self, frequency: int) -> bool:
        return False

    def offer(self, item: SuggestItem) -> None:
        if self.items:
            best = self.items[0].distance
            if item.distance > best:
                return
            if item.distance < best:
                self.items.clear()
        self.budget = item.distance
        self.items.append(item)

    def results(self) -> list[SuggestItem]:
        return sorted(self.items, key=SuggestItem.sort_key)


class TopPolicy(SuggestionPolicy):
    def skip(self, frequency: int) -> bool:
        # a held distance 1 suggestion can only be beaten by a more frequent term
        return bool(self.items) and self.items[0].distance == 1 and frequency <= self.items[0].frequency

    def results(self) -> list[SuggestItem]:
        return super().results()[: self.config.top_results_limit]


class ClosestPolicy(SuggestionPolicy):
    pass


class AllPolicy(SuggestionPolicy):
    exact_shortcut = False

    def offer(self, item: SuggestItem) -> None:
        self.items.append(item)


def lookup(
    word: str,
    config: LookupConfig,
    dictionary: DictionaryProvider,
    is_cancelled: Callable[[], bool] | None = None,
) -> list[SuggestItem]:
    """Return dictionary terms within config.max_distance of `word`

    Suggestions are ordered by distance, then by descending frequency.
    `is_cancelled` is polled before each dictionary entry; once it returns
    True the scan stops with LookupCancelled.
    """
    policy = config.verbosity.policy(config)

    if policy.exact_shortcut:
        frequency = dictionary.lookup_exact(word)
        if frequency is not None:
            return [SuggestItem(term=word, distance=0, frequency=frequency)]

    word_len = len(word)
    for term, frequency in dictionary.iter_entries():
        if is_cancelled is not None and is_cancelled():
            raise LookupCancelled(f"lookup of {word!r} cancelled")
        if abs(len(term) - word_len) > policy.budget:
            continue
        if policy.skip(frequency):
            continue
        distance = damerau_levenshtein(word, term, policy.budget)
        if distance == NOT_WITHIN_BOUND or distance > config.max_distance:
            continue
        policy.offer(SuggestItem(term=term, distance=distance, frequency=frequency))

    return policy.results()


class Speller:
    """Spelling corrector over one dictionary"""

    def __init__(self, dictionary: DictionaryProvider, config: LookupConfig | None = None) -> None:
        self.log = logging.getLogger("linspell.Speller")
        self.dictionary = dictionary
        self.config = config or LookupConfig()

    def lookup(
        self,
        word: str,
        max_distance: int | None = None,
        is_cancelled: Callable[[], bool] | None = None,
    ) -> list[SuggestItem]:
        config = self.config
        if max_distance is not None:
            config = dataclasses.replace(config, max_distance=max_distance)
        suggestions = lookup(word, config, self.dictionary, is_cancelled=is_cancelled)
        self.log.debug(
            "%r: %d suggestions (%s, max distance %d)",
            word,
            len(suggestions),
            config.verbosity.value,
            config.max_distance,
        )
        return suggestions

    def correction(self, word: str) -> str | None:
        """Most probable spelling of word, None when nothing is close enough"""
        suggestions = self.lookup(word)
        return suggestions[0].term if suggestions else None
