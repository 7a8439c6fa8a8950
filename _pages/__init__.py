"""Page rendering functions for each section of the app."""
from _pages.xsteal import page_xsteal
