"""Command-line administration of Cloud Bigtable instances and clusters"""

__version__ = "0.1.0"
