"""Request-level trust boundary for the simple-comment discussion API."""
