"""Use-case layer for guest list workflows.

Each module coordinates domain objects and the guest store port without
performing transport I/O directly.
"""
