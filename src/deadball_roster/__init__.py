"""Convert season batting and pitching stats into Deadball team rosters."""

__version__ = "0.1.0"
