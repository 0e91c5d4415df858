"""Surface program around the core: diagnostics, sessions and the interactive shell."""
