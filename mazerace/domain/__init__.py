"""Pure maze data model and algorithms."""
