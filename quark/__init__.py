"""Game engine building blocks: animation, culling, struct reflection, arenas, assets, text, files, input and material batches."""

__version__ = "0.1.0"