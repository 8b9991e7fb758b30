"""keylang — lexical front end for the keylang toy language."""

__version__ = "0.1.0"
