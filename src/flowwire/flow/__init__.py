"""Read-only models of the flow engine's chat response shapes."""
