"""hairstylex — salon record manager for clients, hairdressers and contacts."""

__version__ = "0.1.0"
