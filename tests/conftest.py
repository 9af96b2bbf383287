# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "loguru",
#     "pydantic",
#     "pysam",
#     "pytest",
# ]
# ///
"""
Pytest fixtures and configuration for famas testing.

This module provides shared fixtures for testing famas.py: FASTQ records with
known quality profiles, helpers writing plain and gzip-compressed FASTQ files,
and trim policies used across the unit and integration tests.
"""

import gzip
import sys
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Add bin directory to Python path so we can import the module under test
BIN_DIR = Path(__file__).parent.parent / "bin"
sys.path.insert(0, str(BIN_DIR))

# Now we can import the module we're testing
from famas import FastqRecord, TrimPolicy


def make_record(
    name: str = "read",
    sequence: str = "ACGTACGTAC",
    quality: str | None = None,
    comment: str = "",
) -> FastqRecord:
    """Build a FastqRecord from text; quality defaults to all Q40 (Phred+33)."""
    if quality is None:
        quality = "I" * len(sequence)
    return FastqRecord(
        name=name.encode(),
        sequence=sequence.encode(),
        quality=quality.encode(),
        comment=comment.encode(),
    )


def fastq_text(records: list[FastqRecord]) -> str:
    """Render records as FASTQ text, independently of famas.format_fastq."""
    lines = []
    for rec in records:
        header = "@" + rec.name.decode()
        if rec.comment:
            header += " " + rec.comment.decode()
        lines.extend(
            [header, rec.sequence.decode(), "+", rec.quality.decode()],
        )
    return "".join(f"{line}\n" for line in lines)


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def write_fastq(temp_dir: Path) -> Callable[..., Path]:
    """Return a helper writing records to a (optionally gzipped) FASTQ file."""

    def _write(
        filename: str,
        records: list[FastqRecord],
        compress: bool = False,  # noqa: FBT001, FBT002
    ) -> Path:
        path = temp_dir / filename
        text = fastq_text(records)
        if compress:
            with gzip.open(path, "wt") as fh:
                fh.write(text)
        else:
            path.write_text(text)
        return path

    return _write


@pytest.fixture
def mixed_quality_record() -> FastqRecord:
    """
    52 bp read whose qualities ramp up to Q39 ('H') at positions 23 and 28
    and fall off again towards both ends.
    """
    return make_record(
        name="HWI-ST740:1:C0JMGACXX:1:1101:2161:2062",
        comment="2:N:0:ATCACG",
        sequence="AAACCCGGGTTTACGTAAACCCGGGTTTACGTAAACCCGGGTTTACGTAAAC",
        quality="?@AAABBBCCCDDDEEEFFFGGGH????HGGGFFFEEEDDDCCCBBBAAA@?",
    )


@pytest.fixture
def short_record() -> FastqRecord:
    """ACGT with qualities 20, 21, 22, 23 (Phred+33)."""
    return make_record(name="short", sequence="ACGT", quality="5678")


@pytest.fixture
def no_trim_policy() -> TrimPolicy:
    """Policy that keeps every read of at least one base untouched."""
    return TrimPolicy(min5p_qual=0, min3p_qual=0, min_read_len=1)


@pytest.fixture
def default_trim_policy() -> TrimPolicy:
    """Moderate policy used by the stream tests."""
    return TrimPolicy(min5p_qual=20, min3p_qual=20, min_read_len=4)


@pytest.fixture(autouse=True)
def configure_logging_for_tests() -> None:
    """Configure logging for tests to reduce noise."""
    # Remove existing handlers and set to WARNING level for tests
    from loguru import logger

    logger.remove()
    logger.add(sys.stderr, level="WARNING")
