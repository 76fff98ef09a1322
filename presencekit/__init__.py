"""presencekit - customizable presence status lines.

Template lines like "Playing {game}" are tokenized, validated against a
customizer catalog and resolved with live field values.
"""

from presencekit.config import VERSION as __version__

__all__ = ["__version__"]
