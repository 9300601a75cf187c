"""pathedit - edit colon-delimited search-path variables from the shell."""

__version__ = "0.1.0"
