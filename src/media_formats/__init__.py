"""media-formats — media format classification by file extension.

Maps filenames to known media formats, classifies them into coarse
categories, and delegates streaming compatibility to renderer profiles.
"""

from media_formats.version import __version__

__all__: list[str] = ["__version__"]
