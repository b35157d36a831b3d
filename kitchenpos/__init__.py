"""Order tracking service for a small restaurant counter and kitchen."""
