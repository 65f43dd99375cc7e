"""
Error taxonomy for the icon build.

Everything raised while processing a single package derives from
BuildError and carries the stage it happened in, so the driver can turn it
into a PackageFailure record. File system failures are plain OSError.
"""

from __future__ import annotations


class BuildError(Exception):
    """Base class for expected build failures."""

    stage = "build"


class AcquisitionError(BuildError):
    """Fetching or locating a package's source material failed."""

    stage = "acquire"


class ExtractionError(BuildError):
    """An icon definition could not be parsed or lacks required metadata."""

    stage = "extract"


class RenderError(BuildError):
    """An icon's payload cannot be expressed as a leptos component."""

    stage = "render"


class LibraryError(BuildError):
    """The target library tree is not where it is expected to be."""

    stage = "library"
