"""AI itinerary planner with Google Places enrichment."""
