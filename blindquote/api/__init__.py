"""Flask routes for quote previews and template status."""
