import logging
import os
import sys

from ce_runner.config import settings

DEFAULT_PROG = "run-on-ce"

COMPILER_IDS = [
    ("g114", "x86-64 gcc 11.4"),
    ("g133", "x86-64 gcc 13.3"),
    ("g142", "x86-64 gcc 14.2"),
    ("gsnapshot", "x86-64 gcc (trunk)"),
    ("clang1500", "x86-64 clang 15.0.0"),
    ("clang1600", "x86-64 clang 16.0.0"),
    ("clang1701", "x86-64 clang 17.0.1"),
    ("clang1810", "x86-64 clang 18.1.0"),
    ("clang1910", "x86-64 clang 19.1.0"),
    ("vcpp_v19_latest_x64", "x64 msvc latest"),
]


def usage_text(prog: str = None) -> str:
    prog = os.path.basename(prog) if prog else DEFAULT_PROG
    lines = [f"Usage: {prog} <compiler-id>", "", "Useful compiler ids:", ""]
    for compiler_id, description in COMPILER_IDS:
        # short ids are padded to one column, the long msvc id is not
        lines.append(f"{compiler_id:<9} - {description}")
    return "\n".join(lines) + "\n"


def write_output(body: bytes, stream=None):
    """Write a response body to stdout as raw bytes, newline-terminated."""
    if stream is None:
        sys.stdout.flush()
        stream = sys.stdout.buffer
    stream.write(body)
    if not body.endswith(b"\n"):
        stream.write(b"\n")
    stream.flush()


def setup_logging(level: str = None):
    logging.basicConfig(
        stream=sys.stderr,
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
