# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .cli import LinSpellCLI


def main() -> None:
    LinSpellCLI().main()


if __name__ == "__main__":
    main()
