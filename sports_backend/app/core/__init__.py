"""Settings, logging setup and host network helpers."""
