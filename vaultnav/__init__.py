"""vaultnav - wikilink navigation helper for markdown vaults."""

__version__ = "0.1.0"
