"""Front-matter, Markdown and filesystem utilities."""
