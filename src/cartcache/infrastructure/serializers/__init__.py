"""Serializer implementations."""

from cartcache.infrastructure.serializers.json import JsonItemSerializer

__all__ = ["JsonItemSerializer"]
