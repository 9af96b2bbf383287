#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "loguru",
#     "pydantic",
#     "pysam",
# ]
# ///
"""
famas - FAstq MASsaging.

Quality-trims single-end or paired-end FASTQ reads and drops reads (or pairs)
that end up shorter than a minimum length. Paired inputs are consumed in strict
lockstep and sampled for mate-order and quality-range consistency.
"""

from __future__ import annotations

import argparse
import gzip
import os
import sys
from contextlib import ExitStack, closing
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import IO, TYPE_CHECKING, NamedTuple

import pysam
from loguru import logger
from pydantic import Field, ValidationInfo, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

# ------------------------------- CONSTANTS -------------------------------- #

DEFAULT_MIN5PQUAL: int = 0
DEFAULT_MIN3PQUAL: int = 3  # Illumina guidelines recommend 3
DEFAULT_MINREADLEN: int = 60
DEFAULT_PHREDOFFSET: int = 33

# Check mate order / quality range on every n-th read (or pair)
PAIRED_ORDER_SAMPLERATE: int = 1000
QUAL_CHECK_SAMPLERATE: int = 1000

# Highest Phred score representable with printable ASCII
MAX_PHRED: int = 93

# Emit a progress debug line after reading this many reads (or pairs)
DEBUG_EVERY: int = 100_000

EARLY_EXIT_MESSAGE = "Don't trust already produced results. Exiting..."


# ------------------------------- EXCEPTIONS -------------------------------- #


class FastqParseError(ValueError):
    """An input entry is not a usable four-line FASTQ record."""


class FastqFormatError(ValueError):
    """A record (or trim interval) cannot be rendered as FASTQ."""


class FatalRunError(RuntimeError):
    """Raised inside the stream processor to abort the run."""


# ------------------------------- DATA TYPES -------------------------------- #


class PhredOffset(IntEnum):
    """ASCII offset of the quality encoding."""

    PHRED33 = 33  # Sanger, SRA, Illumina 1.8+
    PHRED64 = 64  # Illumina 1.3-1.7


@dataclass(frozen=True)
class FastqRecord:
    """One FASTQ entry. The comment is everything after the first whitespace."""

    name: bytes
    sequence: bytes
    quality: bytes
    comment: bytes = b""

    @classmethod
    def from_pysam(cls, entry: pysam.FastxRecord) -> FastqRecord:
        """
        Convert a pysam FastxRecord. Raises FastqParseError for entries without
        qualities or with a sequence/quality length mismatch.
        """
        name = entry.name or ""
        quality = entry.quality
        if not quality:
            msg = f"Record '{name}' has no quality string"
            raise FastqParseError(msg)
        sequence = entry.sequence or ""
        if len(sequence) != len(quality):
            msg = (
                f"Record '{name}' has sequence length {len(sequence)} "
                f"but quality length {len(quality)}"
            )
            raise FastqParseError(msg)
        return cls(
            name=name.encode("ascii"),
            sequence=sequence.encode("ascii"),
            quality=quality.encode("ascii"),
            comment=(entry.comment or "").encode("ascii"),
        )

    @property
    def label(self) -> str:
        """Read name as text, for log messages."""
        return self.name.decode("ascii", errors="replace")


@dataclass(frozen=True)
class TrimPolicy:
    """
    Quality thresholds and length limit for trimming.

    A threshold of 0 disables trimming of that end. min_read_len may be zero or
    negative; the interval search treats anything below 1 as 1.
    """

    min5p_qual: int = DEFAULT_MIN5PQUAL
    min3p_qual: int = DEFAULT_MIN3PQUAL
    min_read_len: int = DEFAULT_MINREADLEN


class TrimInterval(NamedTuple):
    """Zero-based, inclusive positions of the retained part of a read."""

    pos5p: int
    pos3p: int

    @property
    def length(self) -> int:
        return self.pos3p - self.pos5p + 1


class PairStatus(Enum):
    """Outcome of comparing the names of two presumed mates."""

    PAIRED = auto()
    NOT_PAIRED = auto()
    INDETERMINATE = auto()


class RunStatus(Enum):
    SUCCESS = auto()
    FAILURE = auto()


@dataclass(frozen=True)
class StreamConfig:
    """Settings the stream processor needs besides the trim policy."""

    phred_offset: int = DEFAULT_PHREDOFFSET
    qual_check: bool = True
    order_check: bool = True
    qual_check_every: int = QUAL_CHECK_SAMPLERATE
    order_check_every: int = PAIRED_ORDER_SAMPLERATE


@dataclass
class RunCounters:
    """Reads (or pairs) consumed and written so far."""

    reads_in: int = 0
    reads_out: int = 0


class RunReport(NamedTuple):
    reads_in: int
    reads_out: int
    status: RunStatus
    paired: bool = False

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.SUCCESS


# ----------------------------- LOGGING SETUP ------------------------------- #


def configure_logging(verbose: int, quiet: int) -> None:
    """
    Base at SUCCESS (0). Positive → louder (more verbose), negative → quieter.
    Map:
      +3.. = TRACE
      +2   = DEBUG
      +1   = INFO
       0   = SUCCESS
      -1   = WARNING
      -2   = ERROR
      <=-3 = CRITICAL
    """
    logger.remove()
    delta = verbose - quiet
    match delta:
        case d if d >= 3:  # noqa: PLR2004
            level_str = "TRACE"
        case 2:
            level_str = "DEBUG"
        case 1:
            level_str = "INFO"
        case 0:
            level_str = "SUCCESS"
        case -1:
            level_str = "WARNING"
        case -2:
            level_str = "ERROR"
        case d if d <= -3:  # noqa: PLR2004
            level_str = "CRITICAL"
    logger.add(sys.stderr, level=level_str)
    logger.debug(f"Logger configured at level: {level_str}")


# ------------------------------- TRIMMING ---------------------------------- #


def calc_trim_pos(
    record: FastqRecord,
    phred_offset: int,
    policy: TrimPolicy,
) -> TrimInterval | None:
    """
    Find the widest interval whose end bases pass the 5' and 3' thresholds.

    The 3' end is scanned first, from the last base inwards, but never past the
    point where fewer than min_read_len bases would remain. The 5' end is then
    scanned from the first base up to whichever comes first: the 3' cut or the
    last start position that still leaves min_read_len bases.

    Returns None if the read is to be discarded.
    """
    qual = record.quality
    qlen = len(qual)
    min_len = max(policy.min_read_len, 1)

    if min_len > qlen:
        logger.trace(f"'{record.label}' already shorter than {min_len}")
        return None

    # 3' end: tested first, since it is the end users trim most
    if policy.min3p_qual > 0:
        pos3p = None
        for i in range(qlen - 1, min_len - 2, -1):
            if qual[i] - phred_offset >= policy.min3p_qual:
                pos3p = i
                break
        if pos3p is None:
            logger.trace(f"'{record.label}': no 3' position reaches Q{policy.min3p_qual}")
            return None
    else:
        pos3p = qlen - 1

    # 5' end
    if policy.min5p_qual > 0:
        pos5p = None
        for i in range(min(qlen - min_len, pos3p) + 1):
            if qual[i] - phred_offset >= policy.min5p_qual:
                pos5p = i
                break
        if pos5p is None:
            logger.trace(f"'{record.label}': no 5' position reaches Q{policy.min5p_qual}")
            return None
    else:
        pos5p = 0

    # Should be unreachable if the scan bounds above are right
    if pos3p - pos5p + 1 < min_len:
        logger.trace(
            f"'{record.label}': interval {pos5p}-{pos3p} shorter than {min_len}",
        )
        return None

    assert 0 <= pos5p <= pos3p < qlen, (
        f"Invalid trim interval for '{record.label}': {pos5p}-{pos3p} (len={qlen})"
    )
    return TrimInterval(pos5p, pos3p)


# ------------------------------ VALIDATION --------------------------------- #


def qual_range_is_valid(record: FastqRecord, phred_offset: int) -> bool:
    """True if every quality decodes to 0..MAX_PHRED. Empty qualities are invalid."""
    if not record.quality:
        return False
    return all(0 <= q - phred_offset <= MAX_PHRED for q in record.quality)


def check_pair_order(read1: FastqRecord, read2: FastqRecord) -> PairStatus:
    """
    Decide whether two reads are mates by comparing their names.

    Read names either end in '/[12]' (older Illumina/CASAVA) or carry the mate
    number in the comment (' [12]:[NY]:...'), e.g.

        @HWUSI-EAS100R:6:73:941:1973#0/1
        @HWUSI-EAS100R:6:73:941:1973#0/2

        @HWI-ST740:1:C0JMGACXX:1:1101:1452:2203 1:N:0:ATCACG
        @HWI-ST740:1:C0JMGACXX:1:1101:1452:2203 2:N:0:ATCACG

    With comments on both reads the names must be identical; otherwise
    everything but the last two characters must match. The mate marker itself
    is not parsed.
    """
    if len(read1.name) != len(read2.name):
        return PairStatus.INDETERMINATE

    if read1.comment and read2.comment:
        return PairStatus.PAIRED if read1.name == read2.name else PairStatus.NOT_PAIRED

    if len(read1.name) < 3:  # noqa: PLR2004
        return PairStatus.INDETERMINATE
    if read1.name[:-2] == read2.name[:-2]:
        return PairStatus.PAIRED
    return PairStatus.NOT_PAIRED


# ------------------------------ FORMATTING --------------------------------- #


def format_fastq(record: FastqRecord, interval: TrimInterval | None = None) -> bytes:
    """
    Render a record as a four-line FASTQ entry, optionally restricted to an
    inclusive trim interval. The record itself is left untouched.
    """
    if not record.quality:
        msg = f"Record '{record.label}' has no quality string"
        raise FastqFormatError(msg)

    seq = memoryview(record.sequence)
    qual = memoryview(record.quality)
    if interval is not None:
        pos5p, pos3p = interval
        if pos5p < 0 or pos3p < 0:
            msg = f"Negative trim position for '{record.label}': {pos5p}-{pos3p}"
            raise FastqFormatError(msg)
        if pos3p < pos5p:
            msg = f"Inverted trim interval for '{record.label}': {pos5p}-{pos3p}"
            raise FastqFormatError(msg)
        if pos3p >= len(record.quality):
            msg = (
                f"Trim interval {pos5p}-{pos3p} exceeds length "
                f"{len(record.quality)} of '{record.label}'"
            )
            raise FastqFormatError(msg)
        seq = seq[pos5p : pos3p + 1]
        qual = qual[pos5p : pos3p + 1]

    header = b"@" + record.name
    if record.comment:
        header += b" " + record.comment
    return b"".join((header, b"\n", seq, b"\n+\n", qual, b"\n"))


# ----------------------------- I/O UTILITIES ------------------------------- #


def read_fastq(path: str) -> Iterator[FastqRecord]:
    """
    Yield records from a plain or gzip-compressed FASTQ file ('-' for stdin),
    preserving input order.
    """
    logger.debug(f"Opening for read: {path}")
    with pysam.FastxFile(path) as fh:
        for entry in fh:
            yield FastqRecord.from_pysam(entry)


def open_fastq_output(path: str) -> IO[bytes]:
    """Open a gzip-compressed FASTQ output ('-' for stdout)."""
    logger.debug(f"Opening for write: {path}")
    if path == "-":
        return gzip.GzipFile(fileobj=sys.stdout.buffer, mode="wb")
    return gzip.open(path, "wb")


# ------------------------------ CORE LOGIC --------------------------------- #


def _is_sampled(count: int, every: int) -> bool:
    """Sample the 1st, (every+1)-th, (2*every+1)-th, ... read."""
    return count % every == 1 % every


def _next_record(reads: Iterator[FastqRecord], which: str) -> FastqRecord | None:
    """Pull the next record, or None at end of stream. Decoder errors are fatal."""
    try:
        return next(reads, None)
    except (ValueError, OSError) as err:
        msg = f"Couldn't read from {which} input: {err}"
        raise FatalRunError(msg) from err


def _write_record(
    out: IO[bytes],
    record: FastqRecord,
    interval: TrimInterval,
    which: str,
    written: int,
) -> None:
    try:
        out.write(format_fastq(record, interval))
    except (ValueError, OSError) as err:
        msg = (
            f"Couldn't write to {which} output (after successfully writing "
            f"{written} reads): {err}"
        )
        raise FatalRunError(msg) from err


def _check_quality_sample(record: FastqRecord, config: StreamConfig) -> None:
    if not qual_range_is_valid(record, config.phred_offset):
        msg = (
            f"Read {record.label} has qualities outside valid range "
            f"({record.quality.decode('ascii', errors='replace')})"
        )
        raise FatalRunError(msg)


def _run_loop(  # noqa: C901, PLR0912, PLR0913
    reads1: Iterator[FastqRecord],
    out1: IO[bytes],
    policy: TrimPolicy,
    config: StreamConfig,
    counters: RunCounters,
    reads2: Iterator[FastqRecord] | None,
    out2: IO[bytes] | None,
) -> None:
    paired = reads2 is not None
    order_warning_issued = False

    while True:
        read1 = _next_record(reads1, "first")
        if read1 is None:
            break
        read2 = None
        if paired:
            # Read the mate right away to keep both streams in sync
            read2 = _next_record(reads2, "second")
            if read2 is None:
                msg = (
                    "Reached premature end in second input. Still received "
                    f"reads from first input ({read1.label})"
                )
                raise FatalRunError(msg)

        counters.reads_in += 1
        n = counters.reads_in
        if n % DEBUG_EVERY == 0:
            logger.debug(f"Progress: in={n}, out={counters.reads_out}")

        sample_qual = config.qual_check and _is_sampled(n, config.qual_check_every)

        # Quality check before trimming, so the full read is inspected
        if sample_qual:
            _check_quality_sample(read1, config)

        interval1 = calc_trim_pos(read1, config.phred_offset, policy)
        if interval1 is None:
            logger.trace(f"Discarding '{read1.label}'")
            continue

        interval2 = None
        if paired:
            # Only the first mate is range-checked on the sampling tick
            if sample_qual:
                _check_quality_sample(read1, config)

            interval2 = calc_trim_pos(read2, config.phred_offset, policy)
            if interval2 is None:
                logger.trace(f"Discarding pair '{read1.label}' / '{read2.label}'")
                continue

            if (
                config.order_check
                and not order_warning_issued
                and _is_sampled(n, config.order_check_every)
            ):
                match check_pair_order(read1, read2):
                    case PairStatus.NOT_PAIRED:
                        msg = (
                            "Read order check failed. Checked read names were "
                            f"{read1.label} and {read2.label}"
                        )
                        raise FatalRunError(msg)
                    case PairStatus.INDETERMINATE:
                        logger.warning(
                            f"Couldn't derive read order from reads {read1.label} "
                            f"and {read2.label}. Continuing anyway...",
                        )
                        order_warning_issued = True
                    case PairStatus.PAIRED:
                        logger.debug(
                            f"Read order okay for {read1.label} and {read2.label}",
                        )

        _write_record(out1, read1, interval1, "first", counters.reads_out)
        if paired:
            _write_record(out2, read2, interval2, "second", counters.reads_out)

        counters.reads_out += 1

    if paired:
        extra = _next_record(reads2, "second")
        if extra is not None:
            msg = (
                "Reached premature end in first input. Still received reads "
                f"from second input ({extra.label})"
            )
            raise FatalRunError(msg)


def process_stream(  # noqa: PLR0913
    reads1: Iterator[FastqRecord],
    out1: IO[bytes],
    policy: TrimPolicy,
    config: StreamConfig,
    reads2: Iterator[FastqRecord] | None = None,
    out2: IO[bytes] | None = None,
) -> RunReport:
    """
    Trim and filter one stream of reads, or two mate streams in lockstep.

    Processing behavior:
    - Reads (pairs) without a trim interval of at least min_read_len bases are
      dropped; a pair is dropped if either mate fails.
    - Every qual_check_every-th read has its quality range checked (first mate
      only in paired mode); a bad range aborts the run.
    - Every order_check_every-th pair has its mate names compared; a mismatch
      aborts the run, an undecidable comparison is warned about once and not
      retried.
    - Unequal numbers of reads in the two streams abort the run.

    Args:
        reads1: Records of the first (or only) input
        out1: Binary sink for trimmed reads1
        policy: Trimming thresholds and minimum length
        config: Phred offset and sampling settings
        reads2: Records of the mate input; enables paired mode
        out2: Binary sink for trimmed reads2, required in paired mode

    Returns:
        RunReport with reads (pairs) in and out. Counts reflect partial
        progress when the run aborted.
    """
    paired = reads2 is not None
    assert not paired or out2 is not None, "Paired mode requires a second output"
    assert config.qual_check_every > 0 and config.order_check_every > 0, (  # noqa: PT018
        f"Sample rates must be positive: qual={config.qual_check_every}, "
        f"order={config.order_check_every}"
    )

    counters = RunCounters()
    status = RunStatus.SUCCESS
    try:
        _run_loop(reads1, out1, policy, config, counters, reads2, out2)
    except FatalRunError as err:
        logger.error(f"{err}. {EARLY_EXIT_MESSAGE}")
        status = RunStatus.FAILURE

    assert counters.reads_out <= counters.reads_in, (
        f"Wrote more than was read: in={counters.reads_in}, out={counters.reads_out}"
    )
    unit = "pairs" if paired else "reads"
    logger.info(
        f"{counters.reads_in} {unit} in. {counters.reads_out} {unit} out",
    )
    return RunReport(counters.reads_in, counters.reads_out, status, paired)


# --------------------------- RUN CONFIGURATION ----------------------------- #


@pydantic_dataclass
class RunConfig:
    """Validated command line settings for one run."""

    in1: str = Field(min_length=1)
    out1: str = Field(min_length=1)
    in2: str | None = None
    out2: str | None = Field(default=None, validate_default=True)
    min5p_qual: int = Field(default=DEFAULT_MIN5PQUAL, ge=0)
    min3p_qual: int = Field(default=DEFAULT_MIN3PQUAL, ge=0)
    min_read_len: int = Field(default=DEFAULT_MINREADLEN, ge=1)
    phred_offset: PhredOffset = PhredOffset.PHRED33
    order_check: bool = True
    qual_check: bool = True
    force_overwrite: bool = False

    @field_validator("in2")
    @classmethod
    def second_input_differs(cls, v: str | None, info: ValidationInfo) -> str | None:
        if v is not None and info.data and v == info.data.get("in1"):
            msg = "The two input FastQ files are the same file"
            raise ValueError(msg)
        return v

    @field_validator("out2")
    @classmethod
    def outputs_match_inputs(cls, v: str | None, info: ValidationInfo) -> str | None:
        has_in2 = bool(info.data and info.data.get("in2"))
        if has_in2 and v is None:
            msg = "Need two output files for paired-end input"
            raise ValueError(msg)
        if not has_in2 and v is not None:
            msg = "Got second output file, not a corresponding second input file"
            raise ValueError(msg)
        return v

    @property
    def paired(self) -> bool:
        return self.in2 is not None

    def trim_policy(self) -> TrimPolicy:
        return TrimPolicy(
            min5p_qual=self.min5p_qual,
            min3p_qual=self.min3p_qual,
            min_read_len=self.min_read_len,
        )

    def stream_config(self) -> StreamConfig:
        return StreamConfig(
            phred_offset=int(self.phred_offset),
            qual_check=self.qual_check,
            order_check=self.order_check,
        )


def check_paths(config: RunConfig) -> None:
    """
    Inputs must exist and outputs must not, unless overwriting is forced.
    '-' (stdin/stdout) is exempt.
    """
    for path in (config.in1, config.in2):
        if path is None or path == "-":
            continue
        if not os.path.exists(path):
            msg = f"File {path} does not exist"
            raise FileNotFoundError(msg)
    if config.force_overwrite:
        return
    for path in (config.out1, config.out2):
        if path is None or path == "-":
            continue
        if os.path.exists(path):
            msg = f"Cowardly refusing to overwrite existing file {path}"
            raise FileExistsError(msg)


def run(config: RunConfig) -> RunReport:
    """Open all inputs and outputs, process them, and release them on every exit path."""
    with ExitStack() as stack:
        reads1 = stack.enter_context(closing(read_fastq(config.in1)))
        out1 = stack.enter_context(open_fastq_output(config.out1))
        reads2 = out2 = None
        if config.paired:
            reads2 = stack.enter_context(closing(read_fastq(config.in2)))
            out2 = stack.enter_context(open_fastq_output(config.out2))
        return process_stream(
            reads1,
            out1,
            config.trim_policy(),
            config.stream_config(),
            reads2=reads2,
            out2=out2,
        )


# --------------------------------- CLI ------------------------------------- #


def build_parser() -> argparse.ArgumentParser:
    """
    CLI:
      -v / -vv / -vvv       : increase verbosity (INFO -> DEBUG -> TRACE)
      --quiet / --quiet ... : decrease verbosity (WARNING -> ERROR -> CRITICAL)
    (Mutually exclusive.)
    """
    p = argparse.ArgumentParser(
        prog="famas",
        description=(
            "famas - yet another program for FAstq MASsaging.\n"
            "Quality-trims both ends of single-end or paired-end FastQ reads and\n"
            "discards reads (both mates of a pair) falling below a minimum length."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # I/O
    p.add_argument(
        "-i",
        "--in1",
        dest="in1",
        required=True,
        help="Input FastQ file (gzip supported; '-' for stdin)",
    )
    p.add_argument(
        "-j",
        "--in2",
        dest="in2",
        default=None,
        help="Other input FastQ file if paired-end (gzip supported)",
    )
    p.add_argument(
        "-o",
        "--out1",
        dest="out1",
        required=True,
        help="Output FastQ file (will be gzipped; '-' for stdout)",
    )
    p.add_argument(
        "-p",
        "--out2",
        dest="out2",
        default=None,
        help="Other output FastQ file if paired-end input (will be gzipped)",
    )

    # Trimming policy
    p.add_argument(
        "-Q",
        "--min5pqual",
        type=int,
        default=DEFAULT_MIN5PQUAL,
        help=(
            "Trim from start/5'-end if base-call quality is below this value "
            f"(default: {DEFAULT_MIN5PQUAL})"
        ),
    )
    p.add_argument(
        "-q",
        "--min3pqual",
        type=int,
        default=DEFAULT_MIN3PQUAL,
        help=(
            "Trim from end/3'-end if base-call quality is below this value "
            f"(Illumina guidelines recommend 3; default: {DEFAULT_MIN3PQUAL})"
        ),
    )
    p.add_argument(
        "-e",
        "--phred",
        type=int,
        choices=[int(o) for o in PhredOffset],
        default=DEFAULT_PHREDOFFSET,
        help=(
            "Qualities are ASCII-encoded Phred +33 (e.g. Sanger, SRA, Illumina 1.8+) "
            f"or +64 (e.g. Illumina 1.3-1.7) (default: {DEFAULT_PHREDOFFSET})"
        ),
    )
    p.add_argument(
        "-l",
        "--minlen",
        type=int,
        default=DEFAULT_MINREADLEN,
        help=(
            "Discard reads if read length is below this length (discard both reads "
            f"if either is below this limit; default: {DEFAULT_MINREADLEN})"
        ),
    )

    # Sampled checks
    p.add_argument(
        "--no-order-check",
        action="store_true",
        help=(
            "Don't check paired-end read order "
            f"(otherwise checked every {PAIRED_ORDER_SAMPLERATE} reads)"
        ),
    )
    p.add_argument(
        "--no-qual-check",
        action="store_true",
        help=(
            "Don't check quality range "
            f"(otherwise checked every {QUAL_CHECK_SAMPLERATE} reads)"
        ),
    )
    p.add_argument(
        "-f",
        "--force-overwrite",
        action="store_true",
        help="Force overwriting of files",
    )

    # Verbosity: -v/-vv/-vvv or --quiet (repeatable); mutually exclusive
    g = p.add_mutually_exclusive_group()
    g.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (use up to -vvv).",
    )
    g.add_argument(
        "--quiet",
        action="count",
        default=0,
        help="Decrease verbosity (repeat up to three times).",
    )

    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        config = RunConfig(
            in1=args.in1,
            out1=args.out1,
            in2=args.in2,
            out2=args.out2,
            min5p_qual=args.min5pqual,
            min3p_qual=args.min3pqual,
            min_read_len=args.minlen,
            phred_offset=args.phred,
            order_check=not args.no_order_check,
            qual_check=not args.no_qual_check,
            force_overwrite=args.force_overwrite,
        )
        check_paths(config)
    except (ValueError, OSError) as err:
        # pydantic's ValidationError is a ValueError
        logger.error(f"Invalid arguments: {err}")
        sys.exit(1)
    logger.debug(f"RunConfig: {config}")

    try:
        report = run(config)
    except OSError as err:
        logger.error(f"Couldn't open files: {err}. {EARLY_EXIT_MESSAGE}")
        sys.exit(1)

    unit = "pairs" if report.paired else "reads"
    if not report.ok:
        logger.error(
            f"Run failed: {report.reads_in} {unit} in, {report.reads_out} {unit} out",
        )
        sys.exit(1)
    logger.success(f"Kept: {report.reads_out} of {report.reads_in} {unit}")


if __name__ == "__main__":
    main()
