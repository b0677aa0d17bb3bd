"""Whole-resource reading for source documents and theme assets.

Resources are read completely before anything else happens with them, and
the file handle is released on every exit path. Bytes are decoded with
``surrogateescape`` so that undecodable input survives the round trip to
the output unchanged.
"""

from __future__ import annotations

import logging
import sys

from mansite.errors import ResourceOpenError, ResourceReadError

logger = logging.getLogger(__name__)

# Path that selects standard input
STDIN_PATH = "-"
STDIN_NAME = "<stdin>"

ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def display_name(path: str) -> str:
    """Return the identifier used for a resource in diagnostics."""
    return STDIN_NAME if path == STDIN_PATH else path


def read_resource(path: str) -> bytes:
    """Read the full contents of a resource.

    Args:
        path: Filesystem path, or ``-`` for standard input

    Returns:
        The resource contents

    Raises:
        ResourceOpenError: If the resource cannot be opened
        ResourceReadError: If reading the opened resource fails
    """
    if path == STDIN_PATH:
        try:
            data = sys.stdin.buffer.read()
        except OSError as e:
            raise ResourceReadError(display_name(path), e.strerror or str(e)) from e
        logger.debug("read %d bytes from %s", len(data), STDIN_NAME)
        return data

    try:
        f = open(path, "rb")  # noqa: SIM115
    except OSError as e:
        raise ResourceOpenError(path, e.strerror or str(e)) from e

    with f:
        try:
            data = f.read()
        except OSError as e:
            raise ResourceReadError(path, e.strerror or str(e)) from e

    logger.debug("read %d bytes from %s", len(data), path)
    return data


def decode_source(data: bytes) -> str:
    """Decode resource bytes losslessly."""
    return data.decode(ENCODING, _ERRORS)


def encode_output(text: str) -> bytes:
    """Encode rendered output, restoring any undecodable input bytes."""
    return text.encode(ENCODING, _ERRORS)


def read_text_resource(path: str) -> str:
    """Read and decode a whole resource."""
    return decode_source(read_resource(path))
