"""Guest list manager: hosted guest store, inline editing, CSV export."""

__version__ = "0.1.0"
