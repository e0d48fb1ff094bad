"""Pure path template domain logic."""
