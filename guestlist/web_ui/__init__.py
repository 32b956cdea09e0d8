"""NiceGUI web runtime for the guest list page."""
