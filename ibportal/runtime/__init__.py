"""Runtime layer: transport and request execution."""
