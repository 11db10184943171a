"""Dashboard templating on top of kida."""
