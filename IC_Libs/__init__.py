"""
IC_Libs - Image Combiner Library Modules

This package contains core functionality for the Image Combiner project,
organized into specialized sub-packages:

- CombineLib: Dimension negotiation, size standardization, pixel interleaving
  and output assembly
- ImageIOLib: Loading source images and saving combined output
- PipelineLib: End-to-end combine pipeline and its configuration
"""

__version__ = "0.1.0"
