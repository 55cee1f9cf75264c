"""Terminal UI helpers: rendering, text measurement and key input."""
