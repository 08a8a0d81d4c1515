"""devtimer - track time spent coding on a project."""

__version__ = "1.0.0"
