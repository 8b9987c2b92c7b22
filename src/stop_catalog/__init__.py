"""Local catalog of transit stops and the route patterns that serve them."""

__version__ = "0.1.0"
