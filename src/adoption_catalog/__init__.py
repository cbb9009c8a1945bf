"""
Adoption Catalog - browse adoptable animals from a remote listing API.

This package provides tools to:
- Fetch the complete listing of adoptable animals in a single request
- Filter the listing by Chilean administrative region
- Page through the filtered listing with clamped navigation
- Render the current page in the terminal
"""

__version__ = "0.1.0"

from adoption_catalog.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
