"""Application layer: converter interfaces, application-side converters, registry."""
