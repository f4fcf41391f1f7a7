"""Candidate registry domain: descriptors, trie and fallback shorthand index."""
