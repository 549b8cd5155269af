"""Qt-facing pieces: prompt port, Qt adapters and the demo host window."""
