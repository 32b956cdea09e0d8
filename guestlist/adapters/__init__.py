"""Guest store adapters (hosted REST, local SQLite, in-memory)."""
