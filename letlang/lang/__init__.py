"""User-facing side of letlang: sessions, the interactive shell and error reporting."""
