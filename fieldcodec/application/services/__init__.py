"""Application services: converter registry."""

from fieldcodec.application.services.converter_registry import (
    ConverterPair,
    ConverterRegistry,
)

__all__ = ["ConverterPair", "ConverterRegistry"]
