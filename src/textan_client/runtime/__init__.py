"""Runtime services shared across the client (logging, profiling)."""
