"""Editor shell logic for Typst documents: settings, recent files, backups, search, preview and status text."""

__version__ = "0.10.0"