"""Weather and air quality forecast aggregation service."""
