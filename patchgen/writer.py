"""
Patch and preset output

Two output modes:
    inplace  patch.json is written into the sample folder (overwritten if present)
    preset   a new <name>.preset folder is created next to the sample folder,
             the samples are copied into it and patch.json is written there
"""

import json
import os
import shutil
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from pathlib import Path

from patchgen import console
from patchgen.defaults import MAX_PRESET_ATTEMPTS, PATCH_FILENAME, PRESET_SUFFIX
from patchgen.errors import PatchEncodeError, PresetDirectoryError


class OutputMode(str, Enum):
    INPLACE = "inplace"
    PRESET = "preset"


def serialize_patch(patch: dict) -> str:
    return json.dumps(patch, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def encode_patch(patch: dict) -> bytes:
    """Serialize patch to UTF-8 JSON bytes, ready for write_patch."""
    try:
        return serialize_patch(patch).encode('utf-8')
    except ValueError as e:
        # NaN/Infinity values, or file names that are not valid UTF-8
        raise PatchEncodeError(f"Unable to encode patch as UTF-8 JSON! ({e})") from e


def write_patch(path, data: bytes, atomic: bool = True) -> Path:
    """Write encoded patch data to path.

    Atomic writes go to a hidden temp file next to path which is then renamed
    over it. Both modes create the file with the process umask applied.
    """
    path = Path(path)
    if not atomic:
        with open(path, 'wb') as f:
            f.write(data)
        return path

    tmp_path = path.parent / f".{path.name}.{os.urandom(4).hex()}.tmp"
    fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
    return path


def preset_base_name(directory, suffix: str = PRESET_SUFFIX) -> str:
    name = Path(os.path.abspath(directory)).name
    if suffix and name.endswith(suffix):
        name = name[:-len(suffix)]
    return name


def create_preset_directory(directory, suffix: str = PRESET_SUFFIX, max_attempts: int = MAX_PRESET_ATTEMPTS) -> Path:
    """Create a fresh preset folder next to directory.

    Tries name.preset, then name-2.preset, name-3.preset, ... Only an existing
    path counts as a collision; any other OSError is raised as is.
    """
    source = Path(os.path.abspath(directory))
    parent = source.parent
    name = preset_base_name(source, suffix)

    candidate = parent / f"{name}{suffix}"
    for attempt in range(1, max_attempts + 1):
        try:
            candidate.mkdir()
            return candidate
        except FileExistsError:
            console.debug(f"{candidate} already exists. Trying again...")
            candidate = parent / f"{name}-{attempt + 1}{suffix}"

    raise PresetDirectoryError(
        f"Unable to create a preset directory for {name} after {max_attempts} attempts"
    )


def write_preset(
    directory,
    samples,
    data: bytes,
    preset_dir,
    patch_filename: str = PATCH_FILENAME,
    threads: int = 1,
    atomic: bool = True,
) -> Path:
    """Copy samples into an existing preset_dir and write the encoded patch alongside them."""
    source = Path(directory)
    preset_dir = Path(preset_dir)
    destination = preset_dir / patch_filename

    with ThreadPoolExecutor(max_workers=max(1, threads)) as executor:
        futures = [
            executor.submit(shutil.copy2, source / sample, preset_dir / sample)
            for sample in samples
        ]
        futures.append(executor.submit(write_patch, destination, data, atomic))
        for future in futures:
            future.result()

    return destination
