"""HTTP service for the airport catalog."""
