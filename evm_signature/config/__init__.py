"""
Configuration package for evm_signature.
"""
from .settings import settings, get_settings, EvmSignatureSettings

__all__ = ["settings", "get_settings", "EvmSignatureSettings"]
