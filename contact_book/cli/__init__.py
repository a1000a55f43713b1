"""Console front end: the typer app, the interactive menu and rich formatters."""
