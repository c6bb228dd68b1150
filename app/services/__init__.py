"""Data-access services shared by routers and dependencies."""
