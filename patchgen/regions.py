"""
Region building

The frame count is not read from the audio header. It is estimated from the
file size, assuming an 88 byte wrapper and 2 bytes per frame (16-bit mono).
Files with any other layout get a wrong value, possibly negative or
fractional; it is written as computed.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

from patchgen import console
from patchgen.defaults import FRAME_WIDTH, HEADER_BYTES

PITCH_KEYCENTER = 60
MAX_KEY = 127


def frame_count(byte_length: int, header_bytes: int = HEADER_BYTES, frame_width: int = FRAME_WIDTH):
    frames = (byte_length - header_bytes) / frame_width
    return int(frames) if frames.is_integer() else frames


def build_region(sample: str, frames, key: int) -> dict:
    return {
        "fade.in": 0,
        "fade.out": 0,
        "framecount": frames,
        "hikey": key,
        "lokey": key,
        "pan": 0,
        "pitch.keycenter": PITCH_KEYCENTER,
        "playmode": "oneshot",
        "reverse": False,
        "sample": sample,
        "sample.end": frames,
        "transpose": 0,
        "tune": 0,
    }


def build_regions(
    directory,
    samples: List[str],
    key_start: int,
    threads: int = 1,
    header_bytes: int = HEADER_BYTES,
    frame_width: int = FRAME_WIDTH,
) -> Tuple[List[dict], int]:
    """Build one region per sample, keys counting up from key_start in sample order.

    File sizes are read on a thread pool; keys are still handed out in the
    order of `samples`. Returns (regions, next unused key).
    """
    paths = [os.path.join(directory, sample) for sample in samples]
    if threads > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=threads) as executor:
            sizes = list(executor.map(os.path.getsize, paths))
    else:
        sizes = [os.path.getsize(path) for path in paths]

    regions = []
    key = key_start
    for sample, size in zip(samples, sizes):
        frames = frame_count(size, header_bytes, frame_width)
        console.debug(f"  {sample}: {size} bytes -> {frames} frames, key {key}")
        if key > MAX_KEY:
            console.warning(f"Key {key} for {sample} is above {MAX_KEY}")
        regions.append(build_region(sample, frames, key))
        key += 1
    return regions, key
