"""Console logging setup and configuration loading."""
