"""Codec and conversion strategies."""

from .conversion_strategy import (
    ConversionFactory,
    ConversionStrategy,
    CurrentConversion,
    PowerConversion,
    VoltageConversion,
)
from .register_codec import (
    CodecFactory,
    RegisterCodec,
    TwelveBitCodec,
    TwentyFourBitCodec,
    decode12,
    decode24,
    encode12,
    encode24,
)

__all__ = [
    "CodecFactory",
    "RegisterCodec",
    "TwelveBitCodec",
    "TwentyFourBitCodec",
    "decode12",
    "decode24",
    "encode12",
    "encode24",
    "ConversionFactory",
    "ConversionStrategy",
    "CurrentConversion",
    "PowerConversion",
    "VoltageConversion",
]
