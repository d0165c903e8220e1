# Default Configuration for patchgen
#
# A --config file may redefine any of these names; CLI flags win over both.

from pathlib import Path

# Template patch the regions are appended to
TEMPLATE = str(Path(__file__).parent / "template.json")

# Key assigned to the first sample, incremented by one per sample
KEY_START = 53

# "audio" = .wav/.aiff (any case), "wav" = names ending exactly in .wav
SAMPLE_FILTER = "audio"

# "inplace" = write patch.json into the sample folder,
# "preset" = create a sibling <name>.preset folder with copies of the samples
OUTPUT_MODE = "inplace"

# Frame count heuristic: (file size - HEADER_BYTES) / FRAME_WIDTH
HEADER_BYTES = 88
FRAME_WIDTH = 2

# Output naming
PATCH_FILENAME = "patch.json"
PRESET_SUFFIX = ".preset"

# Give up after this many taken preset folder names (name.preset, name-2.preset, ...)
MAX_PRESET_ATTEMPTS = 100

# Worker threads for file size reads and preset copies
THREADS = 4

# Write patch.json through a temp file + rename
ATOMIC_WRITE = True
