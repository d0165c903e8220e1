"""
Example patchgen configuration

Copy this file, adjust the values and pass it with --config. Any setting left
out keeps its built-in default; command line flags override this file.
"""

# Template patch (JSON object with a "regions" list)
# TEMPLATE = "/path/to/template.json"

# First key to assign (one per sample, counting up)
KEY_START = 53

# "audio" = .wav/.aiff in any case, "wav" = names ending exactly in .wav
SAMPLE_FILTER = "audio"

# "inplace" = write patch.json into the sample folder
# "preset"  = create <folder>.preset next to it with copies of the samples
OUTPUT_MODE = "preset"

# Frame count heuristic: (file size - HEADER_BYTES) / FRAME_WIDTH
HEADER_BYTES = 88
FRAME_WIDTH = 2

PATCH_FILENAME = "patch.json"
PRESET_SUFFIX = ".preset"
MAX_PRESET_ATTEMPTS = 100

THREADS = 4
ATOMIC_WRITE = True
