from __future__ import annotations
import logging
import os
from typing import Iterable, List, Union

from .models import Sentence, Corpus
from .normalize import clean_to_tokens
from .config import INCLUDE_EXTS, VERBOSE, PROGRESS_EVERY_FILES

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _iter_source_files(sources: Iterable[PathLike]) -> Iterable[tuple[str, str]]:
    """
    Yield (root, path) for every input file.
    A file source is yielded as-is; a directory is walked recursively for
    INCLUDE_EXTS files in sorted order so sentence ids are reproducible.
    """
    for src in sources:
        src = os.path.abspath(os.fspath(src))
        if os.path.isfile(src):
            yield os.path.dirname(src), src
        elif os.path.isdir(src):
            for dirpath, dirnames, filenames in os.walk(src):
                dirnames.sort()
                for fn in sorted(filenames):
                    if fn.lower().endswith(INCLUDE_EXTS):
                        yield src, os.path.join(dirpath, fn)
        else:
            raise FileNotFoundError(f"Input not found: {src}")


def _rel_to_root(path: str, root: str) -> str:
    try:
        rel = os.path.relpath(path, root)
    except ValueError:
        rel = path
    return rel.replace("\\", "/")


def _yield_sentences(lines: Iterable[str], path_rel: str, start_id: int) -> Iterable[Sentence]:
    sid = start_id
    for i, raw in enumerate(lines, start=1):
        tokens = clean_to_tokens(raw)
        if not tokens:
            continue
        yield Sentence(id=sid, path=path_rel, line_no=i, tokens=tuple(tokens))
        sid += 1


def load_corpus(sources: Union[PathLike, Iterable[PathLike]], *, verbose: bool = VERBOSE) -> Corpus:
    """
    Read every source once and build a Corpus.
    sources: a single file/directory or a list of them.
    Each line with at least one token becomes one Sentence; vocab is sorted.
    verbose: log a progress line every PROGRESS_EVERY_FILES files.
    """
    if isinstance(sources, (str, os.PathLike)):
        sources = [sources]
    sources = list(sources)
    if not sources:
        raise ValueError("load_corpus(): at least one source is required")

    sentences: List[Sentence] = []
    vocab: set[str] = set()
    next_id = 0
    file_count = 0

    for root, path in _iter_source_files(sources):
        rel = _rel_to_root(path, root)
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for s in _yield_sentences(f, rel, next_id):
                sentences.append(s)
                vocab.update(s.tokens)
                next_id = s.id + 1

        file_count += 1
        if verbose and file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%s", f"{file_count:,}")

    log.info("Loaded corpus: files=%d sentences=%d vocab=%d",
             file_count, len(sentences), len(vocab))
    return Corpus(sentences=sentences, vocab=sorted(vocab))


def corpus_from_lines(lines: Iterable[str], path: str = "<memory>") -> Corpus:
    """Build a Corpus from raw text lines already in memory."""
    sentences = list(_yield_sentences(lines, path, 0))
    vocab = {w for s in sentences for w in s.tokens}
    return Corpus(sentences=sentences, vocab=sorted(vocab))
