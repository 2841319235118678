"""Bundled data files for zfsdu."""
