"""Microposts, follows and a status feed."""
