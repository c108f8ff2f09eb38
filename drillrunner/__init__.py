"""Terminal status helpers, a rust-project.json builder and worked programming drills."""

__version__ = "5.5.1"