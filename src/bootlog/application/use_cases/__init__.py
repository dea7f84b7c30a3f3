"""Use cases composing the sink pipeline."""
