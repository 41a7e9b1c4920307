"""Small shared helpers (sender parsing, log redaction)."""
