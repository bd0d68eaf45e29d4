"""Front-end adapters for the line editor."""
