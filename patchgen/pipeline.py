"""
Patch generation pipeline

    load template -> scan samples -> build regions -> assemble patch -> write

Nothing is written to disk before the template has loaded, at least one
sample has been found and the patch has been encoded.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from patchgen import console
from patchgen.errors import NoSamplesFoundError
from patchgen.regions import build_regions
from patchgen.scanner import scan_samples
from patchgen.template import assemble_patch, load_template
from patchgen.writer import (
    OutputMode,
    create_preset_directory,
    encode_patch,
    write_patch,
    write_preset,
)


@dataclass
class PatchResult:
    destination: Optional[Path]
    samples: List[str]
    patch: dict
    next_key: int

    @property
    def region_count(self) -> int:
        return len(self.samples)


class PatchGenerator:
    def __init__(self, directory, settings):
        self.directory = Path(directory)
        self.settings = settings

    def run(self) -> PatchResult:
        settings = self.settings

        template = load_template(settings.template)
        console.debug(f"Loaded template: {settings.template}")

        samples = scan_samples(self.directory, settings.sample_filter)
        if not samples:
            raise NoSamplesFoundError("No wav or aiff files were found! Is this the right directory?")
        console.debug(f"Found {len(samples)} samples in {self.directory}")

        regions, next_key = build_regions(
            self.directory,
            samples,
            settings.key_start,
            threads=settings.threads,
            header_bytes=settings.header_bytes,
            frame_width=settings.frame_width,
        )
        patch = assemble_patch(template, regions)
        data = encode_patch(patch)

        if settings.output_mode is OutputMode.PRESET:
            console.success(f"{len(regions)} files successfully processed. Creating preset...")
        else:
            console.success(f"{len(regions)} files successfully processed.")

        if settings.dry_run:
            console.info("DRY RUN MODE - No changes will be made")
            return PatchResult(None, samples, patch, next_key)

        destination = self.write(samples, data)
        console.success(f"Patch file successfully written to {destination}")
        return PatchResult(destination, samples, patch, next_key)

    def write(self, samples, data: bytes) -> Path:
        settings = self.settings
        if settings.output_mode is OutputMode.INPLACE:
            return write_patch(
                self.directory / settings.patch_filename, data, atomic=settings.atomic_write
            )

        preset_dir = create_preset_directory(
            self.directory, settings.preset_suffix, settings.max_preset_attempts
        )
        console.info(f"Created preset directory: {preset_dir}")
        return write_preset(
            self.directory,
            samples,
            data,
            preset_dir,
            patch_filename=settings.patch_filename,
            threads=settings.threads,
            atomic=settings.atomic_write,
        )
