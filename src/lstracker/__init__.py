"""Learning & Skills Tracker."""

__version__ = "0.1.0"
