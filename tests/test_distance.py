# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from linspell.distance import damerau_levenshtein, NOT_WITHIN_BOUND

import pytest
import random


def reference_distance(seq1: str, seq2: str) -> int:
    """Unbounded optimal string alignment distance over the full matrix"""
    rows = [[0] * (len(seq2) + 1) for _ in range(len(seq1) + 1)]
    for i in range(len(seq1) + 1):
        rows[i][0] = i
    for j in range(len(seq2) + 1):
        rows[0][j] = j
    for i in range(1, len(seq1) + 1):
        for j in range(1, len(seq2) + 1):
            cost = 0 if seq1[i - 1] == seq2[j - 1] else 1
            rows[i][j] = min(rows[i - 1][j] + 1, rows[i][j - 1] + 1, rows[i - 1][j - 1] + cost)
            if i > 1 and j > 1 and seq1[i - 1] == seq2[j - 2] and seq1[i - 2] == seq2[j - 1]:
                rows[i][j] = min(rows[i][j], rows[i - 2][j - 2] + cost)
    return rows[len(seq1)][len(seq2)]


@pytest.mark.parametrize(
    "string1,string2,expected",
    [
        ("kitten", "sitting", 3),
        ("teh", "the", 1),
        ("teh", "than", 3),
        ("abcd", "acbd", 1),
        ("ba", "abc", 2),
        ("fee", "deed", 2),
        # restricted edit model: the transposed pair cannot be edited again
        ("CA", "ABC", 3),
        ("Fred", "fred", 1),
        ("kakfa", "kafka", 1),
        ("kafkaconnect", "kafka_connect", 1),
        ("ab", "abcdef", 4),
        ("xabc", "abc", 1),
    ],
)
def test_known_distances(string1: str, string2: str, expected: int) -> None:
    assert damerau_levenshtein(string1, string2) == expected
    assert damerau_levenshtein(string1, string2, expected) == expected
    assert reference_distance(string1, string2) == expected


@pytest.mark.parametrize("word", ["", "a", "abc", "mississippi", "ÄÖÜ"])
@pytest.mark.parametrize("max_distance", [0, 1, 5])
def test_identical_strings(word: str, max_distance: int) -> None:
    assert damerau_levenshtein(word, word, max_distance) == 0


@pytest.mark.parametrize("word", ["a", "abc", "mississippi"])
@pytest.mark.parametrize("max_distance", [-1, 0, 1, 20])
def test_empty_string_is_length_of_other(word: str, max_distance: int) -> None:
    assert damerau_levenshtein("", word, max_distance) == len(word)
    assert damerau_levenshtein(word, "", max_distance) == len(word)


@pytest.mark.parametrize(
    "string1,string2,max_distance",
    [
        ("teh", "than", 2),
        ("kitten", "sitting", 2),
        ("abc", "xyz", 0),
        ("ab", "abcdef", 3),
        ("a", "abcd", 2),
        ("abcdefgh", "hgfedcba", 4),
    ],
)
def test_out_of_bound(string1: str, string2: str, max_distance: int) -> None:
    assert damerau_levenshtein(string1, string2, max_distance) == NOT_WITHIN_BOUND
    assert damerau_levenshtein(string2, string1, max_distance) == NOT_WITHIN_BOUND


def test_negative_max_distance_is_unbounded() -> None:
    assert damerau_levenshtein("abcdefgh", "hgfedcba", -1) == reference_distance("abcdefgh", "hgfedcba")
    assert damerau_levenshtein("short", "a much longer string", -5) == reference_distance("short", "a much longer string")


def test_matches_reference_on_random_strings() -> None:
    rng = random.Random(20180119)
    for _ in range(3000):
        string1 = "".join(rng.choice("abcd") for _ in range(rng.randint(0, 8)))
        string2 = "".join(rng.choice("abcd") for _ in range(rng.randint(0, 8)))
        max_distance = rng.randint(-1, 6)
        expected = reference_distance(string1, string2)
        actual = damerau_levenshtein(string1, string2, max_distance)
        if not string1 or not string2 or max_distance < 0 or expected <= max_distance:
            assert actual == expected, (string1, string2, max_distance)
        else:
            assert actual == NOT_WITHIN_BOUND, (string1, string2, max_distance)


def test_symmetric_on_random_strings() -> None:
    rng = random.Random(42)
    for _ in range(1000):
        string1 = "".join(rng.choice("xyz") for _ in range(rng.randint(0, 7)))
        string2 = "".join(rng.choice("xyz") for _ in range(rng.randint(0, 7)))
        assert damerau_levenshtein(string1, string2) == damerau_levenshtein(string2, string1)
