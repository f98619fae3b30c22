from __future__ import annotations
import os
from pathlib import Path

# edge cost = WEIGHT_SCALE / bigram count
WEIGHT_SCALE: float = 100.0

# absolute tolerance for distance comparisons
EPSILON: float = 1e-12

# default input/output locations (relative to the working directory)
DEFAULT_BOOK = Path("Resources") / "book.txt"
DEFAULT_OUT_DIR = Path("OutputFiles")

# file types picked up when a directory is given as input
INCLUDE_EXTS = (".txt",)

# report file names
WORD_FREQUENCY_CSV = "word_frequency.csv"
SORTED_WORDS_CSV = "sorted_words.csv"
BIGRAM_FREQUENCY_CSV = "bigram_frequency.csv"

# CLI defaults
TASKS = ("all", "wf", "co", "graph", "gen")
DEFAULT_TASK: str = "all"
TOP_TIERS: int = 3          # how many frequency tiers to print (wf & co)
DEFAULT_START: str = "paul"
DEFAULT_TARGET: str = "arrakis"
DEFAULT_HOPS: int = 1
DEFAULT_GEN_LEN: int = 6

# Progress logging (set WORDGRAPH_VERBOSE=1 to enable)
VERBOSE = os.environ.get("WORDGRAPH_VERBOSE") == "1"
PROGRESS_EVERY_FILES = 500
