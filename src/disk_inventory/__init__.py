from __future__ import annotations

"""
Disk Inventory.

Walks a directory tree, records the size of every entry and produces a
size-sorted, size-filtered report on the console or as a JSON file.
"""

__version__ = "0.1.0"
__app_name__ = "disk-inventory"
