"""HTTP presentation layer for the provisioning bounded context."""
