#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2godoc/options/godoc.py
"""Configuration options for Go doc comment rendering."""

from dataclasses import dataclass, field

from md2godoc.constants import DEFAULT_PACKAGE_NAME, DEFAULT_SUPPRESS_BADGES
from md2godoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class GodocRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a document as Go package documentation.

    Parameters
    ----------
    package_name : str, default "main"
        Go package the documentation belongs to. It appears in the opening
        ``Package <name> is the`` sentence and in the trailing package clause.
        The renderer writes it verbatim; use
        :func:`md2godoc.package_name.validate_package_name` beforehand.
    suppress_badges : bool, default True
        Drop links that wrap an image (status badges) entirely. When False,
        such links render like ordinary links, still without the image.

    Examples
    --------
        >>> from md2godoc.options import GodocRendererOptions
        >>> from md2godoc.renderers.godoc import GodocRenderer
        >>> renderer = GodocRenderer(GodocRendererOptions(package_name="render", suppress_badges=False))

    """

    package_name: str = field(
        default=DEFAULT_PACKAGE_NAME,
        metadata={"help": "Go package name for the generated documentation", "type": str, "importance": "core"},
    )
    suppress_badges: bool = field(
        default=DEFAULT_SUPPRESS_BADGES,
        metadata={
            "help": "Omit links that wrap images (badges) from the output",
            "cli_name": "badges",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
