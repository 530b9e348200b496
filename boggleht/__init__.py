"""Straight-line word search on seeded letter boards, a base-36 string hash, an open-addressing hash table and a Mersenne Twister generator."""

__version__ = "0.1.0"
__all__ = ["mt19937", "strhash", "probing", "hashtable", "boggle"]