"""Wind Speed Service web application."""
