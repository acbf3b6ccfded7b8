"""rxpad - prescription pad with local templates, signatures and logo."""

__version__ = "0.1.0"
