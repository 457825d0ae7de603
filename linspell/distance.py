# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Bounded Damerau-Levenshtein distance (optimal string alignment)"""
from __future__ import annotations

from typing import Final

NOT_WITHIN_BOUND: Final = -1


def damerau_levenshtein(string1: str, string2: str, max_distance: int = -1) -> int:
    """
    Return the number of insertions, deletions, substitutions and adjacent
    transpositions needed to turn `string1` into `string2`.

    This is the restricted edit distance: no substring is edited more than
    once, so "CA" -> "ABC" costs 3 rather than the 2 of full Damerau-Levenshtein.
    Comparison is case sensitive.

    :param str string1: String being compared.
    :param str string2: String being compared against.
    :param int max_distance: Largest distance of interest. Anything above it
        yields NOT_WITHIN_BOUND. A negative value means unbounded.
    :returns: distance >= 0, or NOT_WITHIN_BOUND

    If either string is empty the length of the other is returned as is,
    whatever `max_distance` says.
    """
    if not string1:
        return len(string2)
    if not string2:
        return len(string1)

    # the inner loop runs over the longer string
    if len(string1) > len(string2):
        string1, string2 = string2, string1
    s_len = len(string1)
    t_len = len(string2)

    # common suffix does not change the distance
    while s_len > 0 and string1[s_len - 1] == string2[t_len - 1]:
        s_len -= 1
        t_len -= 1

    start = 0
    if string1[0] == string2[0] or s_len == 0:
        # common prefix does not change the distance either
        while start < s_len and string1[start] == string2[start]:
            start += 1
        s_len -= start
        t_len -= start

        # shorter string is fully covered by the prefix and suffix
        if s_len == 0:
            if max_distance < 0 or t_len <= max_distance:
                return t_len
            return NOT_WITHIN_BOUND

    string1 = string1[start : start + s_len]
    string2 = string2[start : start + t_len]

    len_diff = t_len - s_len
    if max_distance < 0 or max_distance > t_len:
        max_distance = t_len
    elif len_diff > max_distance:
        return NOT_WITHIN_BOUND

    # costs of the previous row, cells beyond reach are capped at max_distance + 1
    costs = [j + 1 if j < max_distance else max_distance + 1 for j in range(t_len)]
    # diagonal costs one row further back, for transpositions
    prev_costs = [0] * t_len

    j_start_offset = max_distance - len_diff
    have_max = max_distance < t_len
    j_start = 0
    j_end = max_distance
    s_char = string1[0]
    current = 0
    for i in range(s_len):
        prev_s_char = s_char
        s_char = string1[i]
        t_char = string2[0]
        left = i
        current = left + 1
        next_trans_cost = 0
        # window spans the diagonals from i - (max_distance - len_diff) to i + max_distance
        if i > j_start_offset:
            j_start += 1
        if j_end < t_len:
            j_end += 1
        for j in range(j_start, j_end):
            above = current
            this_trans_cost = next_trans_cost
            next_trans_cost = prev_costs[j]
            # left holds the substitution (diagonal) cost at this point
            prev_costs[j] = current = left
            left = costs[j]
            prev_t_char = t_char
            t_char = string2[j]
            if s_char != t_char:
                if left < current:
                    current = left  # insertion
                if above < current:
                    current = above  # deletion
                current += 1
                if i != 0 and j != 0 and s_char == prev_t_char and prev_s_char == t_char:
                    this_trans_cost += 1
                    if this_trans_cost < current:
                        current = this_trans_cost  # transposition
            costs[j] = current
        if have_max and costs[i + len_diff] > max_distance:
            return NOT_WITHIN_BOUND

    return current if current <= max_distance else NOT_WITHIN_BOUND
