# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault
from .cliarg import arg
from .dictionary import FrequencyDictionary, load_dictionary, save_frequencies
from .distance import damerau_levenshtein, NOT_WITHIN_BOUND
from .speller import LookupConfig, Speller, Verbosity
from argparse import ArgumentParser
from typing import Any, Callable, Mapping

import dataclasses
import sys
import time

SUGGESTION_COLUMNS = ["word", "term", "distance", "frequency"]
CONFIG_KEYS: dict[str, type] = {
    "dictionary": str,
    "max_distance": int,
    "top_results_limit": int,
    "verbosity": str,
}


def no_dictionary(fun: Callable) -> Callable:
    fun.no_dictionary = True  # type: ignore
    return fun


def lookup_config_from(settings: Mapping[str, Any]) -> LookupConfig:
    """Build a LookupConfig from config file style settings"""
    defaults = LookupConfig()
    try:
        return LookupConfig(
            max_distance=settings.get("max_distance", defaults.max_distance),
            verbosity=Verbosity(settings.get("verbosity", defaults.verbosity.value)),
            top_results_limit=settings.get("top_results_limit", defaults.top_results_limit),
        )
    except ValueError as ex:
        raise argx.UserError(f"Invalid lookup settings: {ex}") from ex


class LinSpellCLI(argx.CommandLineTool):
    dictionary: FrequencyDictionary

    def __init__(self) -> None:
        argx.CommandLineTool.__init__(self, "linspell")

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--dictionary",
            help="Frequency dictionary file or http(s) URL [LINSPELL_DICTIONARY], default %(default)r",
            default=envdefault.LINSPELL_DICTIONARY,
            metavar="PATH_OR_URL",
        )
        parser.add_argument(
            "--corpus",
            help="Build the dictionary by counting the words of a text corpus given with --dictionary",
            action="store_true",
        )
        parser.add_argument("--term-index", type=int, default=0, help="Dictionary column holding the term")
        parser.add_argument("--count-index", type=int, default=1, help="Dictionary column holding the count")
        parser.add_argument(
            "--request-timeout",
            type=int,
            default=None,
            help="Wait for up to N seconds when fetching a dictionary URL (default: infinite)",
        )

    def pre_run(self, func: Callable[[], int | None]) -> None:
        if getattr(func, "no_dictionary", False):
            return

        source = self.args.dictionary or self.config.get("dictionary")
        if not source:
            raise argx.UserError(
                "no dictionary: use --dictionary, LINSPELL_DICTIONARY or 'linspell config set dictionary PATH'"
            )
        self.dictionary = load_dictionary(
            source,
            term_index=self.args.term_index,
            count_index=self.args.count_index,
            corpus=self.args.corpus,
            timeout=self.args.request_timeout,
        )

    def _lookup_config(self) -> LookupConfig:
        """Lookup settings from the command line, falling back to the config file"""
        settings = dict(self.config)
        for key in ("max_distance", "verbosity", "top_results_limit"):
            value = getattr(self.args, key, None)
            if value is not None:
                settings[key] = value
        return lookup_config_from(settings)

    @arg("word", nargs="+", help="Word to correct")
    @arg.max_distance
    @arg.verbosity
    @arg.top
    @arg.json
    @arg.csv
    @arg.format
    def lookup(self) -> None:
        """Suggest spelling corrections for words"""
        speller = Speller(self.dictionary, self._lookup_config())
        rows = []
        for word in self.args.word:
            start = time.monotonic()
            suggestions = speller.lookup(word)
            self.log.debug("lookup of %r took %.3f ms", word, (time.monotonic() - start) * 1000)
            if not suggestions:
                self.log.info("%s: no suggestions", word)
            rows.extend(dict(item.as_dict(), word=word) for item in suggestions)

        self.print_response(
            rows,
            json=self.args.json,
            csv=self.args.csv,
            format=self.args.format,
            table_layout=SUGGESTION_COLUMNS,
        )

    @no_dictionary
    @arg("string1", help="First string")
    @arg("string2", help="Second string")
    @arg.max_distance
    def distance(self) -> None:
        """Show the edit distance between two strings"""
        max_distance = -1 if self.args.max_distance is None else self.args.max_distance
        result = damerau_levenshtein(self.args.string1, self.args.string2, max_distance)
        print(">{}".format(max_distance) if result == NOT_WITHIN_BOUND else result)

    @arg.json
    def dictionary__stats(self) -> None:
        """Show dictionary statistics"""
        stats = {
            "entries": len(self.dictionary),
            "max_length": self.dictionary.max_length,
            "total_frequency": self.dictionary.total_frequency,
        }
        self.print_response(
            stats,
            json=self.args.json,
            single_item=True,
            table_layout=["entries", "max_length", "total_frequency"],
        )

    @no_dictionary
    @arg("corpus", help="Text corpus file or http(s) URL")
    @arg("-o", "--output", help="Write the dictionary to FILE instead of standard output", metavar="FILE")
    def dictionary__build(self) -> None:
        """Build a frequency dictionary from a text corpus"""
        dictionary = load_dictionary(self.args.corpus, corpus=True, timeout=self.args.request_timeout)
        if not self.args.output:
            save_frequencies(dictionary, sys.stdout)
            return

        with open(self.args.output, "w", encoding="utf-8") as fp:
            save_frequencies(dictionary, fp)
        self.log.info("wrote %d terms to %r", len(dictionary), self.args.output)

    @no_dictionary
    @arg.json
    def config__show(self) -> None:
        """Show lookup defaults"""
        settings = {
            "config_file": self.args.config,
            "dictionary": self.args.dictionary or self.config.get("dictionary"),
            **dataclasses.asdict(self._lookup_config()),
        }
        self.print_response(
            settings,
            json=self.args.json,
            single_item=True,
            table_layout=["config_file", "dictionary", "max_distance", "verbosity", "top_results_limit"],
        )

    @no_dictionary
    @arg("key", choices=sorted(CONFIG_KEYS), help="Setting name")
    @arg("value", help="Setting value")
    def config__set(self) -> None:
        """Store a default setting in the config file"""
        key = self.args.key
        value: Any = self.args.value
        if CONFIG_KEYS[key] is int:
            try:
                value = int(value)
            except ValueError as ex:
                raise argx.UserError(f"Invalid value for {key}: {value!r} is not an integer") from ex

        lookup_config_from(dict(self.config, **{key: value}))
        self.config[key] = value
        self.config.save()
        self.log.info("%s set to %r in %s", key, value, self.config.file_path)


if __name__ == "__main__":
    LinSpellCLI().main()
