"""vaultnav API package."""
