"""Core engine for zfsdu.

Navigation state, list building, deletion planning and the session loop.
"""
