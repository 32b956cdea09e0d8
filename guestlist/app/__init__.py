"""App-level wiring and controllers for the guest list runtime."""
