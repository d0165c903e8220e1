"""Sampler patch generator: turns a folder of samples into a patch.json preset."""

__version__ = "1.2.0"
__description__ = "Sampler patch generator"
