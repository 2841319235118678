"""zfsdu - interactive ZFS space browser with snapshot cleanup."""

__version__ = "0.1.0"
