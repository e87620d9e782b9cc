"""Core configuration, exceptions, protocols and type aliases."""
