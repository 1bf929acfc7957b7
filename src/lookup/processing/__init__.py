"""Line-stream processing for lookup: comment elision and include splicing."""
__all__ = [
    "comment_filter",
    "include_resolver",
]
