"""mime.types parsing performance benchmarks."""

import statistics
import time
from pathlib import Path

import pytest

from mimetable.config.parser import MimeTypesParser
from mimetable.utils.mediatype import parse_media_type


@pytest.fixture
def large_mime_file(tmp_path: Path) -> Path:
    """Create a mime.types file with 5000 types."""
    mime_file = tmp_path / "mime.types"

    lines = ["# generated"]
    for i in range(5000):
        lines.append(f"application/x-bench-{i}\tb{i}a b{i}b b{i}c")
        if i % 10 == 0:
            lines.append(f"text/x-bench-{i};charset=us-ascii t{i}")

    mime_file.write_text("\n".join(lines) + "\n")
    return mime_file


def test_mime_file_parsing(large_mime_file: Path) -> None:
    """Benchmark parsing a large mime.types file."""
    parser = MimeTypesParser(large_mime_file)

    start = time.perf_counter()
    table = parser.parse()
    elapsed = time.perf_counter() - start

    print("\n[PERF] mime.types parsing (5000 types):")
    print(f"  Time: {elapsed * 1000:.2f}ms")
    print(f"  Extensions: {len(table)}")
    print(f"  Throughput: {len(table) / elapsed:.0f} ext/s")

    assert len(table) == 15500
    assert elapsed < 5.0


def test_media_type_parsing_throughput() -> None:
    """Benchmark parse_media_type on a parameter-heavy string."""
    value = 'multipart/form-data; boundary="----abc;def"; charset=utf-8; x-a=1; x-b=2'
    timings = []

    for _ in range(5):
        start = time.perf_counter()
        for _ in range(2000):
            parse_media_type(value)
        timings.append(time.perf_counter() - start)

    mean = statistics.mean(timings)
    print("\n[PERF] parse_media_type (2000 calls):")
    print(f"  Mean: {mean * 1000:.2f}ms")
    print(f"  Per call: {mean / 2000 * 1_000_000:.1f}us")

    assert mean < 5.0
