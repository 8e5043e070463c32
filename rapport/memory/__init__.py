"""Memory layer: entity models, static catalogs and the in-memory ledger."""
