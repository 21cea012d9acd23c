"""DocLedger package initializer.

Shared text documents with an append-only revision history and role-gated
write access.
"""
