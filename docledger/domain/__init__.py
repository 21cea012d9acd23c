"""Domain layer: entities, the version ledger and the access policy."""
