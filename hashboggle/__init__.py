"""String hashing, an open-addressing hash table, a Mersenne Twister and a Boggle word finder."""

__version__ = "0.1.0"

__all__ = ["mt19937", "strhash", "hashtable", "boggle"]