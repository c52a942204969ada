"""Recipe Box Service - recipe sharing API with ratings and favorites."""

__version__ = "0.1.0"
