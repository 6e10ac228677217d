"""Infrastructure layer: adapters, serializer, logging and wiring."""
