"""checksymlinks - find and clean up broken symbolic links.

Walks a directory tree, classifies every symbolic link as valid or
broken, and optionally removes broken links or all links.
"""

__version__ = "0.1.2"
