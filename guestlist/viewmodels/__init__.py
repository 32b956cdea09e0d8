"""ViewModel package for UI state and command surfaces.

Call context:
    ``guestlist.app.guest_list_controller`` mutates these viewmodels and
    ``guestlist.web_ui.main`` renders them.

Responsibilities:
    - Expose mutable UI state for the guest page.
    - Keep MVVM boundaries explicit by avoiding transport or persistence logic.
"""
