"""Application – masking and redaction use cases."""
