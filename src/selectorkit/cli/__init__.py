"""selectorkit command-line interface."""
