"""doclens - terminal viewer for offline Rust crate documentation."""

__version__ = "0.3.0"
