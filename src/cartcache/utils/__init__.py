"""Utility helpers for cartcache."""

from cartcache.utils.duration import parse_duration

__all__ = ["parse_duration"]
