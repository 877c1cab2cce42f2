"""Blog API: token-authenticated users and their posts."""
