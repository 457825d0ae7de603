# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from linspell import envdefault
from linspell.cli import LinSpellCLI, lookup_config_from
from linspell.argx import UserError
from linspell.speller import LookupConfig, Verbosity
from pathlib import Path
from pytest import CaptureFixture, LogCaptureFixture

import json
import logging
import pytest

EXIT_CODE_INVALID_USAGE = 2


@pytest.fixture(autouse=True)
def fixture_no_environment_dictionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(envdefault, "LINSPELL_DICTIONARY", None)


@pytest.fixture(name="config_path")
def fixture_config_path(tmp_path: Path) -> str:
    return str(tmp_path / "linspell.json")


@pytest.fixture(name="dictionary_path")
def fixture_dictionary_path(tmp_path: Path) -> str:
    path = tmp_path / "words.txt"
    path.write_text("the 100\nthee 10\nthan 50\nword 30\nwordy 3\nwords 20\n", encoding="utf-8")
    return str(path)


def run(config_path: str, *args: str) -> int | None:
    return LinSpellCLI().run(args=["--config", config_path, *args])


def test_cli() -> None:
    with pytest.raises(SystemExit) as excinfo:
        LinSpellCLI().run(args=["--help"])
    assert excinfo.value.code == 0


def test_lookup_json(config_path: str, dictionary_path: str, capsys: CaptureFixture[str]) -> None:
    assert run(config_path, "--dictionary", dictionary_path, "lookup", "--json", "teh", "wrod") is None
    assert json.loads(capsys.readouterr().out) == [
        {"word": "teh", "term": "the", "distance": 1, "frequency": 100},
        {"word": "wrod", "term": "word", "distance": 1, "frequency": 30},
    ]


def test_lookup_table(config_path: str, dictionary_path: str, capsys: CaptureFixture[str]) -> None:
    run(config_path, "--dictionary", dictionary_path, "lookup", "the")
    assert capsys.readouterr().out.splitlines() == [
        "WORD  TERM  DISTANCE  FREQUENCY",
        "====  ====  ========  =========",
        "the   the   0         100",
    ]


def test_lookup_all_verbosity(config_path: str, dictionary_path: str, capsys: CaptureFixture[str]) -> None:
    run(config_path, "--dictionary", dictionary_path, "lookup", "-V", "all", "-d", "1", "--format", "{term}", "word")
    assert capsys.readouterr().out.splitlines() == ["word", "words", "wordy"]


def test_lookup_top_limit(config_path: str, dictionary_path: str, capsys: CaptureFixture[str]) -> None:
    run(config_path, "--dictionary", dictionary_path, "lookup", "-V", "closest", "--csv", "wordx")
    assert capsys.readouterr().out.splitlines() == [
        "word,term,distance,frequency",
        "wordx,word,1,30",
        "wordx,words,1,20",
        "wordx,wordy,1,3",
    ]

    run(config_path, "--dictionary", dictionary_path, "lookup", "-n", "2", "--format", "{term}", "wordx")
    # "words" and "wordy" are less frequent than "word", found first at distance 1
    assert capsys.readouterr().out.splitlines() == ["word"]


def test_lookup_without_suggestions(
    config_path: str, dictionary_path: str, capsys: CaptureFixture[str], caplog: LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    assert run(config_path, "--dictionary", dictionary_path, "lookup", "--json", "xylophone") is None
    assert json.loads(capsys.readouterr().out) == []
    assert "xylophone: no suggestions" in caplog.text


def test_lookup_from_corpus(config_path: str, tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("the cat sat on the mat\n", encoding="utf-8")
    run(config_path, "--dictionary", str(corpus), "--corpus", "lookup", "--json", "teh")
    assert json.loads(capsys.readouterr().out) == [{"word": "teh", "term": "the", "distance": 1, "frequency": 2}]


def test_lookup_without_dictionary(config_path: str, caplog: LogCaptureFixture) -> None:
    assert run(config_path, "lookup", "teh") == 1
    assert "no dictionary" in caplog.text


def test_lookup_missing_dictionary_file(config_path: str, tmp_path: Path, caplog: LogCaptureFixture) -> None:
    assert run(config_path, "--dictionary", str(tmp_path / "missing.txt"), "lookup", "teh") == 1
    assert "command failed: DictionaryError" in caplog.text


def test_lookup_invalid_verbosity(config_path: str, dictionary_path: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(config_path, "--dictionary", dictionary_path, "lookup", "-V", "loud", "teh")
    assert excinfo.value.code == EXIT_CODE_INVALID_USAGE


@pytest.mark.parametrize(
    "args,expected",
    [
        (["kitten", "sitting"], "3"),
        (["kitten", "sitting", "-d", "2"], ">2"),
        (["", "abc", "-d", "1"], "3"),
        (["same", "same"], "0"),
    ],
)
def test_distance(config_path: str, args: list[str], expected: str, capsys: CaptureFixture[str]) -> None:
    assert run(config_path, "distance", *args) is None
    assert capsys.readouterr().out.strip() == expected


def test_dictionary_build_and_stats(config_path: str, tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("The cat and the hat.\nthe end\n", encoding="utf-8")
    output = tmp_path / "built.txt"

    assert run(config_path, "dictionary", "build", str(corpus), "-o", str(output)) is None
    assert output.read_text(encoding="utf-8").splitlines() == ["the 2", "The 1", "and 1", "cat 1", "end 1", "hat 1"]

    run(config_path, "dictionary", "build", str(corpus))
    assert capsys.readouterr().out.splitlines()[0] == "the 2"

    run(config_path, "--dictionary", str(output), "dictionary", "stats", "--json")
    assert json.loads(capsys.readouterr().out) == {"entries": 6, "max_length": 3, "total_frequency": 7}


def test_config_set_and_show(config_path: str, dictionary_path: str, capsys: CaptureFixture[str]) -> None:
    assert run(config_path, "config", "set", "dictionary", dictionary_path) is None
    assert run(config_path, "config", "set", "max_distance", "1") is None
    assert run(config_path, "config", "set", "verbosity", "closest") is None
    assert json.loads(Path(config_path).read_text(encoding="utf-8")) == {
        "dictionary": dictionary_path,
        "max_distance": 1,
        "verbosity": "closest",
    }

    run(config_path, "config", "show", "--json")
    assert json.loads(capsys.readouterr().out) == {
        "config_file": config_path,
        "dictionary": dictionary_path,
        "max_distance": 1,
        "verbosity": "closest",
        "top_results_limit": 3,
    }

    # stored defaults apply, command line flags win
    run(config_path, "lookup", "--format", "{term}", "thn")
    assert capsys.readouterr().out.splitlines() == ["the", "than"]
    run(config_path, "lookup", "-d", "0", "--json", "thn")
    assert json.loads(capsys.readouterr().out) == []


@pytest.mark.parametrize(
    "key,value",
    [
        ("verbosity", "loud"),
        ("max_distance", "-1"),
        ("max_distance", "two"),
        ("top_results_limit", "0"),
    ],
)
def test_config_set_rejects_invalid_values(config_path: str, key: str, value: str) -> None:
    assert run(config_path, "config", "set", key, value) == 1
    assert not Path(config_path).exists()


def test_lookup_config_from() -> None:
    assert lookup_config_from({}) == LookupConfig()
    assert lookup_config_from({"verbosity": "all", "top_results_limit": 5}) == LookupConfig(
        verbosity=Verbosity.ALL, top_results_limit=5
    )
    with pytest.raises(UserError):
        lookup_config_from({"max_distance": "2"})
