"""
Command line driver for all tasks, with timing and an optional self-check.

Tasks:
  wf    - word frequency (csvs + top-k tiers)
  co    - bigram co-occurrence (csv + rank tier)
  graph - word graph queries (shortest path, words at hops)
  gen   - simple text generator
  all   - run everything (default)

Examples:
  python -m wordgraph --task wf -k 3
  python -m wordgraph --task graph --start paul --target arrakis --hops 2
  python -m wordgraph -i Resources/book.txt -o OutputFiles --task all
  python -m wordgraph --check
"""
from __future__ import annotations
import argparse, json, logging, time
from typing import Callable, List

from . import config as CFG
from .check import Expectations
from .engine import Engine
from .normalize import normalize_word
from .report import (bigram_tier_lines, hop_lines, path_lines, sentence_lines,
                     word_tier_lines)

log = logging.getLogger("wordgraph")


def _emit(lines: List[str]) -> None:
    for ln in lines:
        print(ln)


def _run(title: str, task: Callable[[], None]) -> bool:
    """Run one task with a banner and timing; failures are logged, not raised."""
    print(f"\n================ {title} ================")
    t = time.perf_counter()
    try:
        task()
        return True
    except Exception:
        log.exception("ERROR in %s", title)
        return False
    finally:
        print(f"{title} finished in {(time.perf_counter() - t) * 1000:.0f} ms")


# ---------- task runners ----------

def run_word_frequency(eng: Engine, args: argparse.Namespace) -> None:
    try:
        eng.write_reports(args.out, tasks=("wf",))
    except OSError as exc:
        log.warning("writing word-frequency CSVs failed: %s", exc)
    tiers = eng.word_tiers()
    for t in tiers.top(max(1, args.tier)):
        if args.json:
            print(json.dumps({"rank": t.rank, "count": t.count, "words": list(t.items)}))
        else:
            _emit(word_tier_lines(t))


def run_cooccurrence(eng: Engine, args: argparse.Namespace) -> None:
    try:
        eng.write_reports(args.out, tasks=("co",))
    except OSError as exc:
        log.warning("writing bigram CSV failed: %s", exc)
    t = eng.bigram_tiers().tier(max(1, args.tier))
    if args.json:
        print(json.dumps({"rank": t.rank, "count": t.count, "pairs": [list(p) for p in t.items]}))
    else:
        _emit(bigram_tier_lines(t))


def run_word_graph(eng: Engine, args: argparse.Namespace) -> None:
    a = normalize_word(args.start)
    b = normalize_word(args.target)
    if not eng.has_word(a):
        log.warning("start word '%s' not found in corpus.", a)
        return
    if not eng.has_word(b):
        log.warning("target word '%s' not found in corpus.", b)
        return

    res = eng.shortest_path(a, b)
    words = eng.nodes_at_hops(a, args.hops)
    if args.json:
        print(json.dumps({
            "path": res.to_dict() if res is not None else None,
            "hops": {"src": a, "hops": args.hops, "words": words},
        }))
    else:
        _emit(path_lines(a, b, res))
        _emit(hop_lines(a, args.hops, words))


def run_generator(eng: Engine, args: argparse.Namespace) -> None:
    s = eng.generate(normalize_word(args.start), max(1, args.len))
    if args.json:
        print(json.dumps({"complete": s.complete, "words": list(s.words)}))
    else:
        _emit(sentence_lines(s))


def run_self_check(eng: Engine, args: argparse.Namespace) -> None:
    exp = None
    if args.start and args.target:
        a, b = normalize_word(args.start), normalize_word(args.target)
        exp = Expectations(words=(a, b))
    results = eng.self_check(exp)
    for r in results:
        print(r.line())
    issues = sum(1 for r in results if not r.ok)
    if issues == 0:
        print("Self-check OK")
    else:
        print(f"Self-check found {issues} issue(s) (see warnings above)")


# ---------- argument parsing ----------

def _non_negative(text: str) -> int:
    v = int(text)
    if v < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wordgraph", description="Word frequency, bigrams and word graph queries")
    p.add_argument("-i", "--input", action="append", default=None,
                   help=f"Input text file or folder, repeatable (default {CFG.DEFAULT_BOOK})")
    p.add_argument("-o", "--out", default=str(CFG.DEFAULT_OUT_DIR), help="Output directory for CSV reports")
    p.add_argument("-t", "--task", type=str.lower, choices=CFG.TASKS, default=CFG.DEFAULT_TASK)
    p.add_argument("-k", "--tier", type=int, default=CFG.TOP_TIERS, help="Print top <n> frequency tiers")
    p.add_argument("--start", default=CFG.DEFAULT_START, help="Start word for graph & generator")
    p.add_argument("--target", default=CFG.DEFAULT_TARGET, help="Target word for graph path")
    p.add_argument("--hops", type=_non_negative, default=CFG.DEFAULT_HOPS, help="Hop distance for neighbors")
    p.add_argument("--len", type=int, default=CFG.DEFAULT_GEN_LEN, help="Generated sentence length")
    p.add_argument("--check", action="store_true", help="Run a quick self-check of counts/graph")
    p.add_argument("--json", action="store_true", help="Emit JSON rows instead of text")
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.INFO if (args.verbose or CFG.VERBOSE) else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    sources = args.input or [str(CFG.DEFAULT_BOOK)]
    eng = Engine()
    t = time.perf_counter()
    try:
        eng.build(sources)
    except (OSError, ValueError) as exc:
        log.error("FATAL: failed to load corpus: %s", exc)
        return 2
    print(f"Load corpus finished in {(time.perf_counter() - t) * 1000:.0f} ms")

    task = args.task
    run_all = task == "all"
    ok = True
    try:
        if run_all or task == "wf":
            ok &= _run("Task 1 - Word Frequency", lambda: run_word_frequency(eng, args))
        if run_all or task == "co":
            ok &= _run("Task 2 - Co-occurrence", lambda: run_cooccurrence(eng, args))
        if run_all or task == "graph":
            ok &= _run("Task 3 - Word Graph", lambda: run_word_graph(eng, args))
        if run_all or task == "gen":
            ok &= _run("Task 4 - Generator", lambda: run_generator(eng, args))
        if args.check:
            ok &= _run("Self-check", lambda: run_self_check(eng, args))
    finally:
        eng.shutdown()
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
