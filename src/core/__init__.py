"""Core extraction pipeline: document decoding and resume field extraction."""
