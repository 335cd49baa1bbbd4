"""Trackable QR codes for marketing campaigns."""
