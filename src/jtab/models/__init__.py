"""Data models: conversion settings and JSON value kinds."""

from .config import ConvertConfig
from .values import JsonKind, to_compact_json

__all__ = [
    "ConvertConfig",
    "JsonKind",
    "to_compact_json",
]
