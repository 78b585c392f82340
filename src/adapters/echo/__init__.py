"""Echo adapters - HTTP implementations of the echo port."""

from .httpbin import EchoEnvelope, HttpBinEchoClient

__all__ = ["EchoEnvelope", "HttpBinEchoClient"]
