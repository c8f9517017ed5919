"""Static configuration for the Automation Exercise test suite."""
