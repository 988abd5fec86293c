"""Application layer: worker pool, settings and command line."""
