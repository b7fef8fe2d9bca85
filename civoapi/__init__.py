"""Client library for the Civo cloud API: SSH keys, teams, users, volumes and webhooks."""

__version__ = "0.1.0"