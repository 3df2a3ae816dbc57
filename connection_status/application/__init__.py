"""Application layer: ports the infrastructure adapters implement."""
