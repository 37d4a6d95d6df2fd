"""hncli: browse Hacker News stories from the terminal."""

__version__ = "0.1.0"
