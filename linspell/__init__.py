# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .dictionary import FrequencyDictionary, load_dictionary
from .distance import damerau_levenshtein, NOT_WITHIN_BOUND
from .speller import LookupCancelled, LookupConfig, lookup, Speller, SuggestItem, Verbosity
