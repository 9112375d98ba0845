"""Provisioning bounded context.

Creates and drops tenant Postgres databases together with their owning roles.
"""
