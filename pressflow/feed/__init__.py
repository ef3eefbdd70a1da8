"""
Press-release input for the extractor.

The network side of the news API is out of scope; this package only
reads releases that have already been saved to disk.
"""

from .item import Attachment, PressRelease, load_press_release, parse_press_release  # noqa: F401
