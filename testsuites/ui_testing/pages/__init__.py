"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Movie App.

Author: Automation Team
License: MIT
================================================================================
"""

from .movie_page import MoviePage

__all__ = [
    "MoviePage",
]
