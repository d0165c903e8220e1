"""
Sample directory scanning

Results follow os.listdir() order. No sort is applied, so the order (and with
it the key assignment) can differ between filesystems.
"""

import os
from enum import Enum


class SampleFilter(str, Enum):
    AUDIO = "audio"  # .wav / .aiff, any case
    WAV = "wav"      # exactly ".wav"

    def accepts(self, filename: str) -> bool:
        if self is SampleFilter.WAV:
            return filename.endswith(".wav")
        return os.path.splitext(filename)[1].lower() in (".wav", ".aiff")


def scan_samples(directory, sample_filter=SampleFilter.AUDIO):
    """Return the names of qualifying sample files in directory."""
    sample_filter = SampleFilter(sample_filter)
    samples = []
    for name in os.listdir(directory):
        if not sample_filter.accepts(name):
            continue
        if not os.path.isfile(os.path.join(directory, name)):
            continue
        samples.append(name)
    return samples
