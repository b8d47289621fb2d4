import logging
import sys

import httpx

from ce_runner.config import settings
from ce_runner.compiler import read_source, submit
from ce_runner.utils import usage_text, write_output, setup_logging

logger = logging.getLogger(__name__)


def run(compiler_id: str, transport: httpx.BaseTransport = None) -> bytes:
    source = read_source(settings.source_file)
    return submit(compiler_id, source, settings.base_url, transport=transport)


def main(argv: list = None, transport: httpx.BaseTransport = None) -> int:
    argv = sys.argv if argv is None else argv
    setup_logging()

    if len(argv) < 2:
        sys.stdout.write(usage_text(argv[0] if argv else None))
        return 0

    compiler_id = argv[1]
    if len(argv) > 2:
        logger.debug("Ignoring extra arguments: %s", argv[2:])

    write_output(run(compiler_id, transport=transport))
    return 0

