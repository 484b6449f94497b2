"""cqueue CLI - command line client for the cqueue job queue API"""

__version__ = "0.1.0"
