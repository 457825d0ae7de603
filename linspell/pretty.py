# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print lookup results as tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, List, Mapping, TextIO, Tuple, Union

import dataclasses
import enum
import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Collection[Union[List[str], Tuple[str], str]]


class CustomJsonEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, enum.Enum):
            return o.value
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return dataclasses.asdict(o)

        return json.JSONEncoder.default(self, o)


def format_item(key: str | None, value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(format_item(None, entry) for entry in value)
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, str):
        # json encode strings only when they need escaping
        json_v = json.dumps(value, ensure_ascii=False)
        return value if json_v == '"{}"'.format(value) else json_v
    if value is None:
        return ""
    return json.dumps(value, sort_keys=True, cls=CustomJsonEncoder)


def flatten_list(complex_list: TableLayout | None) -> Collection[str]:
    """Flatten a multi-dimensional list to 1D list"""
    if complex_list is None:
        return []
    flattened_list: list[str] = []
    for level1 in complex_list:
        if isinstance(level1, (list, tuple)):
            flattened_list.extend(flatten_list(level1))
        else:
            flattened_list.append(level1)
    return flattened_list


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts as a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Columns to print, in order. Defaults to every
        key of the items, sorted.
    :param bool header: True to print the field name
    """
    columns = list(flatten_list(table_layout)) if table_layout is not None else sorted({k for item in result for k in item})
    rows = [{column: format_item(column, item.get(column)) for column in columns} for item in result]
    widths = {column: max([len(column)] + [len(row[column]) for row in rows]) for column in columns}

    if header:
        yield "  ".join(column.upper().ljust(widths[column]) for column in columns).rstrip()
        yield "  ".join("=" * widths[column] for column in columns)
    for row in rows:
        yield "  ".join(row[column].ljust(widths[column]) for column in columns).rstrip()


def print_table(
    result: Collection[Any] | ResultType | None,
    table_layout: TableLayout | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""

    def yield_rows() -> Iterator[str]:
        if not result:
            return
        elif not isinstance(next(iter(result), None), Mapping):
            yield from (format_item(None, item) for item in result)
        else:
            yield from yield_table(result, table_layout=table_layout, header=header)

    for row in yield_rows():
        print(row, file=file or sys.stdout)
