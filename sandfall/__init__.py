"""Falling-sand sandbox simulation and a skyline rectangle packer."""

__version__ = "0.1.0"
__all__ = ["geometry", "pixel", "scene", "rectpack"]