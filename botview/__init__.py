"""botview — compare what search-engine crawlers see on a list of URLs."""

__version__ = "1.0.0"
