import argparse


class PatchgenError(Exception):
    """Base class for failures reported as a single error message.

    main() turns these into exit status 1. InvalidDirectoryError is raised
    while parsing arguments instead, where argparse reports it as a usage
    error (exit status 2).
    """


class ConfigError(PatchgenError):
    pass


class InvalidDirectoryError(PatchgenError, argparse.ArgumentTypeError):
    """Sample directory is missing or not a directory (reported as a usage error)."""


class TemplateReadError(PatchgenError):
    pass


class TemplateParseError(PatchgenError):
    pass


class NoSamplesFoundError(PatchgenError):
    pass


class PatchEncodeError(PatchgenError):
    """Patch cannot be written as strict UTF-8 JSON."""


class PresetDirectoryError(PatchgenError):
    """No free preset directory name within the allowed number of attempts."""
