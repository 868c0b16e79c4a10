"""Benchmark the trie keyword matcher against a regex alternation."""

import gc
import json
import random
import re
import string
import time
import tracemalloc
from pathlib import Path
from typing import Callable

import matplotlib.pyplot as plt
import psutil

from src.matcher.keyword_matcher import KeywordMatcher

RESULTS_DIR = (
    Path(__file__).parent.parent / "static" / "benchmarks" / "extraction"
)
KEYWORD_SET_SIZES = [10, 100, 1000, 10000]
DOCUMENT_WORDS = 50000
REPEATS = 5
SEED = 1234


def random_word(rng: random.Random) -> str:
    """Return a random lowercase word of 3 to 10 letters."""
    return "".join(
        rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10))
    )


def build_document(rng: random.Random, keywords: list[str]) -> str:
    """Build a document mixing keywords, random words and punctuation.

    Args:
        rng (random.Random): The random source.
        keywords (list[str]): The keywords to sprinkle into the document.

    Returns:
        str: The generated document.

    """
    words = []
    for _ in range(DOCUMENT_WORDS):
        if rng.random() < 0.1:
            words.append(rng.choice(keywords))
        else:
            words.append(random_word(rng))
        words.append(rng.choice([" ", " ", " ", ", ", ". ", "\n", " 42 "]))
    return "".join(words)


def trie_extractor(keywords: list[str]) -> Callable[[str], set[str]]:
    """Return an extraction function backed by `KeywordMatcher`."""
    matcher = KeywordMatcher(case_sensitive=False)
    matcher.add_keywords(keywords)
    return matcher.extract_keywords


def regex_extractor(keywords: list[str]) -> Callable[[str], set[str]]:
    """Return an extraction function backed by one compiled regex.

    Words are maximal runs of letters, so the lookarounds reject any
    neighbouring letter and accept digits or punctuation.
    """
    alternation = "|".join(
        re.escape(keyword)
        for keyword in sorted(set(keywords), key=len, reverse=True)
    )
    pattern = re.compile(rf"(?<![^\W\d_])(?:{alternation})(?![^\W\d_])")

    def extract(document: str) -> set[str]:
        return set(pattern.findall(document.lower()))

    return extract


EXTRACTORS: dict[str, Callable[[list[str]], Callable[[str], set[str]]]] = {
    "Trie Matcher": trie_extractor,
    "Regex Alternation": regex_extractor,
}


def run_benchmark(
    name: str,
    factory: Callable[[list[str]], Callable[[str], set[str]]],
    keywords: list[str],
    document: str,
) -> dict[str, float | int]:
    """Measure building and scanning time and memory for one extractor.

    Args:
        name (str): The display name of the extractor.
        factory (Callable): Builds the extraction function from keywords.
        keywords (list[str]): The keywords to register.
        document (str): The document to scan.

    Returns:
        dict[str, float | int]: The collected metrics.

    """
    process = psutil.Process()
    rss_before = process.memory_info().rss

    tracemalloc.start()
    start = time.perf_counter()
    extract = factory(keywords)
    build_time_ms = (time.perf_counter() - start) * 1000
    _, peak_memory = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    scan_times: list[float] = []
    found = 0
    for _ in range(REPEATS):
        start = time.perf_counter()
        found = len(extract(document))
        scan_times.append((time.perf_counter() - start) * 1000)

    rss_after = process.memory_info().rss
    average = sum(scan_times) / len(scan_times)
    print(
        f"{name}: {len(keywords)} keywords, build {build_time_ms:.2f} ms, "
        f"scan {average:.2f} ms, found {found}",
    )

    return {
        "build_time_ms": build_time_ms,
        "average_scan_time_ms": average,
        "peak_build_memory_bytes": peak_memory,
        "rss_delta_bytes": rss_after - rss_before,
        "keywords_found": found,
    }


def plot_results(results: dict[str, dict[int, dict[str, float | int]]]) -> None:
    """Save a grouped bar chart of the average scan times."""
    plt.figure(figsize=(8, 5))
    x = range(len(KEYWORD_SET_SIZES))
    width = 0.8 / len(results)

    for offset, (name, per_size) in enumerate(results.items()):
        y_values = [
            float(per_size[size]["average_scan_time_ms"])
            for size in KEYWORD_SET_SIZES
        ]
        positions = [i + offset * width for i in x]
        plt.bar(positions, y_values, width=width, label=name)
        for position, v in zip(positions, y_values):
            plt.text(position, v + 0.01, f"{v:.1f}", ha="center", va="bottom")

    plt.xticks(
        [i + width * (len(results) - 1) / 2 for i in x],
        [str(size) for size in KEYWORD_SET_SIZES],
    )
    plt.xlabel("Keywords")
    plt.ylabel("Scan Time (ms)")
    plt.title(f"Scan Time for a {DOCUMENT_WORDS}-word Document")
    plt.legend()
    plt.tight_layout()
    plt.savefig(RESULTS_DIR / "benchmark_extraction.png")
    plt.close("all")


def main() -> None:
    """Main function."""
    rng = random.Random(SEED)
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    results: dict[str, dict[int, dict[str, float | int]]] = {
        name: {} for name in EXTRACTORS
    }
    for size in KEYWORD_SET_SIZES:
        print(f"\n--- Benchmark with {size} keywords ---")
        keywords = [random_word(rng) for _ in range(size)]
        document = build_document(rng, keywords)

        for name, factory in EXTRACTORS.items():
            try:
                results[name][size] = run_benchmark(
                    name,
                    factory,
                    keywords,
                    document,
                )
            finally:
                gc.collect()

    plot_results(results)

    results_json_path = RESULTS_DIR / "results.json"
    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)
    print(f"\nResults written to {results_json_path}")


if __name__ == "__main__":
    main()
