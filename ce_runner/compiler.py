import logging
import httpx

from ce_runner.config import settings
from ce_runner.schemas import CompileRequest, CompileOptions

logger = logging.getLogger(__name__)

MSVC_MARKER = "vcpp"
STANDARD = "c++20"


def standard_flag(compiler_id: str) -> str:
    # msvc spells it -std:c++20, gcc and clang -std=c++20
    if MSVC_MARKER in compiler_id:
        return f"-std:{STANDARD}"
    return f"-std={STANDARD}"


def build_request(source: str, compiler_id: str) -> CompileRequest:
    return CompileRequest(
        source=source,
        options=CompileOptions(userArguments=standard_flag(compiler_id))
    )


def compile_url(compiler_id: str, base_url: str = None) -> str:
    base_url = (base_url or settings.base_url).rstrip("/")
    return f"{base_url}/api/compiler/{compiler_id}/compile"


def read_source(path: str = None) -> str:
    path = path or settings.source_file
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    logger.debug("Read %d characters from %s", len(source), path)
    return source


def submit(compiler_id: str, source: str, base_url: str = None, transport: httpx.BaseTransport = None) -> bytes:
    """Post one compile-and-execute request and return the raw response bytes.

    Error statuses from the remote side are not raised, the body is returned
    as it came. Transport failures propagate as httpx exceptions.
    """
    url = compile_url(compiler_id, base_url)
    body = build_request(source, compiler_id).model_dump_json()

    logger.debug("POST %s", url)
    with httpx.Client(transport=transport, timeout=None) as client:
        response = client.post(
            url,
            content=body,
            headers={"Content-Type": "application/json"}
        )
    logger.debug("Response %d, %d bytes", response.status_code, len(response.content))
    return response.content
