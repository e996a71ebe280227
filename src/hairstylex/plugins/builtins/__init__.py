"""Plugins shipped with hairstylex."""
