"""Feature modules for redaction, client errors, and response interception."""
