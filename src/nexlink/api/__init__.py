"""HTTP API for NexLink."""
