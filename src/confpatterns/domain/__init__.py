"""Domain layer: settings store, report builders and order prototypes."""
