"""OpenWeatherMap client, rendering, and support utilities."""
