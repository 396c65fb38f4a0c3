"""deadcss -- find CSS class and id selectors that no component references."""

__version__ = "0.1.0"
