"""
Secret generation with a clear fallback.
By default every position is drawn locally and independently with
secrets.randbelow (colors 1..6, repeats allowed).

With CODE_SOURCE=random.org we ask random.org for the colors instead. If
anything goes wrong (no internet, timeout, bad response), we fall back to
the local generator so a reset always succeeds.
"""

import logging
from secrets import randbelow
from typing import List

import requests

from . import config

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


def local_code(length: int = config.CODE_LENGTH) -> List[int]:
    # randbelow(6) gives 0..5, shift into the palette 1..6
    return [randbelow(config.PALETTE_SIZE) + 1 for _ in range(length)]


def remote_code(length: int = config.CODE_LENGTH) -> List[int]:
    """Fetch `length` colors from random.org. Raises on any failure."""
    params = {
        "num": length,                 # how many numbers we want
        "min": 1,                      # smallest color
        "max": config.PALETTE_SIZE,    # largest color
        "col": 1,                      # one number per line
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    response = requests.get(RANDOM_URL, params=params, timeout=config.RANDOM_TIMEOUT)
    response.raise_for_status()

    # The body looks like:
    #   3\n1\n6\n2\n
    colors = [int(line) for line in response.text.splitlines() if line.strip()]

    if len(colors) != length:
        raise ValueError(f"random.org returned {len(colors)} values, expected {length}.")
    for color in colors:
        if color < 1 or color > config.PALETTE_SIZE:
            raise ValueError(f"random.org number {color} out of range 1..{config.PALETTE_SIZE}.")
    return colors


def fetch_code(length: int = config.CODE_LENGTH) -> List[int]:
    if config.CODE_SOURCE != "random.org":
        return local_code(length)

    try:
        return remote_code(length)
    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local generator", exc)
        return local_code(length)
