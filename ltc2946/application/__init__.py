"""Application layer: attribute use cases orchestrating codec, conversion and bus."""
