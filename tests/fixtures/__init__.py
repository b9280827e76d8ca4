"""Static fixtures shared across tests."""
