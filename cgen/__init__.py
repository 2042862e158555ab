"""Generic in-memory containers driven by user-supplied comparison and hash functions."""

__version__ = "0.1.0"

__all__ = ["gdl", "gsl", "gvec", "heap", "hmap", "hset", "p1w", "p2w", "rbm", "rbs", "text"]