from .settings import MerkleSettings, get_settings

__all__ = ["MerkleSettings", "get_settings"]
