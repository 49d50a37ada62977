from .hash_utils import hash_fields, hash_text

__all__ = ["hash_fields", "hash_text"]
