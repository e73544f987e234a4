"""Demo dataset and runner."""
