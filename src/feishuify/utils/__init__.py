from .chunk import chunk_blocks

__all__ = [
    "chunk_blocks",
]
