"""Core CSN loading: schema model, errors, and the parse pipeline."""
