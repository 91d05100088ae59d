"""Command line interface for walletwise."""
