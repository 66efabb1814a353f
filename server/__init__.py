"""HTTP server for the withdrawal gateway."""
