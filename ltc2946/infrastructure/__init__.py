"""Infrastructure layer: concrete bus transports and cross-cutting decorators."""
